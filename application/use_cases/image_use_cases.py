import structlog
from returns.result import Failure, Result, Success

from application.dtos.errors import AppError
from application.dtos.image_dtos import ImageBlob
from application.ports.blob_store import BlobStore
from domain.exceptions import BlobNotFoundError
from domain.services.fallback_policy import ImageFallbackPolicy
from domain.value_objects.mime_type import content_type_for

logger = structlog.get_logger()


class FetchImageUseCase:
    """Fetch a single image from the blob store by its exact key."""

    def __init__(self, blob_store: BlobStore) -> None:
        self.blob_store = blob_store

    async def execute(self, key: str) -> Result[ImageBlob, AppError]:
        """Read ``key`` from the blob store.

        Args:
            key: Storage key, used as-is

        Returns:
            Success with the image, or a Failure whose category is
            ``not_found`` when the key is absent and ``storage_error``
            when the store could not be read

        """
        try:
            content = self.blob_store.get_bytes(key)
        except BlobNotFoundError:
            logger.debug("image_not_found", key=key)
            return Failure(AppError("not_found", "Image not found"))
        except Exception as e:  # noqa: BLE001
            # Backends raise their own error types (botocore, gcsfs, OSError...)
            logger.warning("image_fetch_failed", key=key, error=str(e))
            return Failure(AppError("storage_error", "Error fetching image"))

        logger.debug("image_fetched", key=key, size_bytes=len(content))
        return Success(
            ImageBlob(key=key, content=content, content_type=content_type_for(key)),
        )


class FetchImageWithDefaultUseCase:
    """Fetch an image, falling back to default images when it is missing.

    Candidates come from ``ImageFallbackPolicy`` and are tried one at a time.
    Storage errors are treated like a missing key so the next candidate is
    tried; only running out of candidates is reported to the caller.
    """

    def __init__(
        self,
        fetch_image: FetchImageUseCase,
        fallback_policy: ImageFallbackPolicy | None = None,
    ) -> None:
        self.fetch_image = fetch_image
        self.fallback_policy = fallback_policy or ImageFallbackPolicy()

    async def execute(self, image_path: str, default_image: str) -> Result[ImageBlob, AppError]:
        candidates = self.fallback_policy.candidates(image_path, default_image)

        for attempt, key in enumerate(candidates, start=1):
            result = await self.fetch_image.execute(key)
            if isinstance(result, Success):
                if attempt > 1:
                    logger.info(
                        "fallback_resolved",
                        requested=image_path,
                        resolved=key,
                        attempt=attempt,
                    )
                return result

            logger.debug(
                "fallback_attempt_failed",
                key=key,
                attempt=attempt,
                reason=result.failure().category,
            )

        logger.info(
            "fallback_exhausted",
            requested=image_path,
            default_image=default_image,
            attempts=len(candidates),
        )
        return Failure(AppError("not_found", "Default image not found"))
