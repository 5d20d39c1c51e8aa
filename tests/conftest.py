"""Shared test fixtures and configuration."""

from __future__ import annotations

import pytest

from application.use_cases.image_use_cases import FetchImageUseCase, FetchImageWithDefaultUseCase
from tests.mocks import MockBlobStore


@pytest.fixture
def webp_bytes() -> bytes:
    """Return a minimal RIFF/WEBP header."""
    return b"RIFF\x1a\x00\x00\x00WEBPVP8 "


@pytest.fixture
def jpeg_bytes() -> bytes:
    """Return a minimal JPEG start-of-image marker."""
    return b"\xff\xd8\xff\xe0\x00\x10JFIF"


@pytest.fixture
def blob_store() -> MockBlobStore:
    """Create an empty in-memory blob store."""
    return MockBlobStore()


@pytest.fixture
def fetch_image(blob_store: MockBlobStore) -> FetchImageUseCase:
    return FetchImageUseCase(blob_store)


@pytest.fixture
def fetch_with_default(fetch_image: FetchImageUseCase) -> FetchImageWithDefaultUseCase:
    return FetchImageWithDefaultUseCase(fetch_image)
