from fastapi import HTTPException, Response, status

from application.dtos.errors import AppError
from application.dtos.image_dtos import ImageBlob
from infrastructure.config import settings


def _map_app_error_to_http_exception(error: AppError) -> HTTPException:
    """Map application layer errors to appropriate HTTP exceptions."""
    if error.category == "not_found":
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=error.message,
        )
    if error.category == "storage_error":
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error.message,
        )
    # Unknown error category
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )


def image_response(image: ImageBlob) -> Response:
    return Response(
        content=image.content,
        media_type=image.content_type,
        headers={"Cache-Control": f"public, max-age={settings.cache_max_age}"},
    )
