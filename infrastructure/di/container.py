from lagom import Container

from application.ports.blob_store import BlobStore
from application.use_cases.image_use_cases import FetchImageUseCase, FetchImageWithDefaultUseCase
from domain.services.fallback_policy import ImageFallbackPolicy
from infrastructure.blob_stores.fsspec_blob_store import FsspecBlobStore
from infrastructure.config import settings


def create_container() -> Container:
    container = Container()

    # Blob storage (fsspec)
    blob_store_instance = FsspecBlobStore(
        base_url=settings.blob_base_url,
        storage_options=settings.blob_storage_options,
    )
    container[BlobStore] = blob_store_instance

    container[ImageFallbackPolicy] = ImageFallbackPolicy(
        prefix=settings.default_image_prefix,
        global_default=settings.default_image_name,
        extension=settings.default_image_extension,
    )

    # Register Use Cases
    container[FetchImageUseCase] = lambda c: FetchImageUseCase(blob_store=c[BlobStore])
    container[FetchImageWithDefaultUseCase] = lambda c: FetchImageWithDefaultUseCase(
        fetch_image=c[FetchImageUseCase],
        fallback_policy=c[ImageFallbackPolicy],
    )

    return container
