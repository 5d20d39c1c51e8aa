"""Tests for infrastructure components."""

from __future__ import annotations

import logging
import logging.handlers
from collections.abc import Iterator
from pathlib import Path
from uuid import uuid4

import fsspec
import pytest
from returns.result import Failure

from application.use_cases.image_use_cases import FetchImageUseCase, FetchImageWithDefaultUseCase
from domain.exceptions import BlobNotFoundError, InfrastructureError
from infrastructure.blob_stores.fsspec_blob_store import FsspecBlobStore
from infrastructure.config import Settings, settings
from infrastructure.di.container import create_container
from infrastructure.logging import _handlers


@pytest.fixture
def memory_base_url() -> Iterator[str]:
    """Yield a fresh memory:// bucket and remove it afterwards."""
    bucket = f"bucket-{uuid4().hex}"
    yield f"memory://{bucket}"
    fs = fsspec.filesystem("memory")
    if fs.exists(f"/{bucket}"):
        fs.rm(f"/{bucket}", recursive=True)


def _put(base_url: str, key: str, data: bytes) -> None:
    with fsspec.open(f"{base_url}/{key}", "wb") as f:
        f.write(data)


def _permission_denied(url: str, *args: object, **kwargs: object) -> None:
    msg = f"Permission denied: {url}"
    raise PermissionError(msg)


class TestFsspecBlobStore:
    """Test FsspecBlobStore against the in-memory fsspec filesystem."""

    def test_get_bytes(self, memory_base_url: str) -> None:
        _put(memory_base_url, "2023/photo.webp", b"webp-bytes")
        store = FsspecBlobStore(memory_base_url)

        assert store.get_bytes("2023/photo.webp") == b"webp-bytes"

    def test_trailing_slash_in_base_url(self, memory_base_url: str) -> None:
        _put(memory_base_url, "a.png", b"png")
        store = FsspecBlobStore(memory_base_url + "/")

        assert store.get_bytes("a.png") == b"png"

    def test_missing_key_raises_not_found(self, memory_base_url: str) -> None:
        store = FsspecBlobStore(memory_base_url)

        with pytest.raises(BlobNotFoundError):
            store.get_bytes("missing.jpg")

    @pytest.mark.parametrize("key", ["", "../secret.png", "a/../../b.png"])
    def test_invalid_keys_are_not_found(self, memory_base_url: str, key: str) -> None:
        store = FsspecBlobStore(memory_base_url)

        with pytest.raises(BlobNotFoundError):
            store.get_bytes(key)

    @pytest.mark.parametrize("key", ["def", "photos/", "photos/2023"])
    def test_directory_keys_are_not_found(self, tmp_path: Path, key: str) -> None:
        (tmp_path / "def").mkdir()
        (tmp_path / "photos" / "2023").mkdir(parents=True)
        store = FsspecBlobStore(f"file://{tmp_path}")

        with pytest.raises(BlobNotFoundError):
            store.get_bytes(key)

    def test_directory_in_memory_bucket_is_not_found(self, memory_base_url: str) -> None:
        _put(memory_base_url, "def/default.webp", b"webp")
        store = FsspecBlobStore(memory_base_url)

        with pytest.raises(BlobNotFoundError):
            store.get_bytes("def")

    def test_read_failure_is_not_reported_as_missing(
        self,
        memory_base_url: str,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        _put(memory_base_url, "a.png", b"png")
        monkeypatch.setattr(fsspec, "open", _permission_denied)
        store = FsspecBlobStore(memory_base_url)

        with pytest.raises(InfrastructureError, match="a.png"):
            store.get_bytes("a.png")

    @pytest.mark.asyncio
    async def test_fallback_chain_over_fsspec(self, memory_base_url: str) -> None:
        _put(memory_base_url, "photos/a.jpg", b"jpg")
        store = FsspecBlobStore(memory_base_url)
        use_case = FetchImageWithDefaultUseCase(FetchImageUseCase(store))

        result = await use_case.execute("photos/2023/a.jpg", "site")

        image = result.unwrap()
        assert image.key == "photos/a.jpg"
        assert image.content_type == "image/jpeg"

    @pytest.mark.asyncio
    async def test_read_failure_maps_to_storage_error(
        self,
        memory_base_url: str,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(fsspec, "open", _permission_denied)
        use_case = FetchImageUseCase(FsspecBlobStore(memory_base_url))

        result = await use_case.execute("a.png")

        assert isinstance(result, Failure)
        assert result.failure().category == "storage_error"


class TestSettings:
    """Test Settings defaults and environment overrides."""

    def test_defaults(self) -> None:
        assert settings.cache_max_age == 86400
        assert settings.default_image_prefix == "def"
        assert settings.default_image_name == "default"
        assert settings.default_image_extension == ".webp"
        assert settings.blob_base_url.startswith("file://")

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BLOB_BASE_URL", "s3://images")
        monkeypatch.setenv("CACHE_MAX_AGE", "60")

        overridden = Settings()

        assert overridden.blob_base_url == "s3://images"
        assert overridden.cache_max_age == 60


class TestContainer:
    """Test dependency wiring."""

    def test_use_cases_are_wired(self) -> None:
        container = create_container()

        use_case = container[FetchImageWithDefaultUseCase]

        assert isinstance(use_case, FetchImageWithDefaultUseCase)
        assert isinstance(use_case.fetch_image, FetchImageUseCase)
        assert isinstance(use_case.fetch_image.blob_store, FsspecBlobStore)
        assert use_case.fallback_policy.prefix == settings.default_image_prefix
        assert use_case.fallback_policy.global_default == settings.default_image_name


class TestLogging:
    """Test log handler selection."""

    def test_stdout_only_when_file_logging_disabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "log_to_file", False)

        handlers = _handlers(logging.Formatter())

        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)

    def test_rotating_file_handler(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setattr(settings, "log_to_file", True)
        monkeypatch.setattr(settings, "log_dir", tmp_path / "logs")

        handlers = _handlers(logging.Formatter())
        try:
            assert isinstance(handlers[1], logging.handlers.TimedRotatingFileHandler)
            assert (tmp_path / "logs").is_dir()
        finally:
            for handler in handlers:
                handler.close()
