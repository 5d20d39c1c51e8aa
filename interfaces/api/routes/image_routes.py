from typing import Annotated

from fastapi import APIRouter, Depends, Response
from lagom import Container

from application.use_cases.image_use_cases import FetchImageUseCase, FetchImageWithDefaultUseCase
from interfaces.api.middleware import handle_use_case_errors
from interfaces.api.routes.helpers import image_response
from interfaces.dependencies import get_container

router = APIRouter(tags=["images"])


@router.api_route(
    "/images/{image_path:path}",
    methods=["GET", "HEAD"],
    response_class=Response,
)
@handle_use_case_errors
async def get_image(
    image_path: str,
    container: Annotated[Container, Depends(get_container)],
) -> Response:
    """Serve the image stored under ``image_path``.

    Returns:
        200 OK: Image bytes with their content type
        404 Not Found: No image under that key
        500 Internal Server Error: The blob store could not be read

    """
    use_case = container[FetchImageUseCase]
    result = await use_case.execute(image_path)
    return result.map(image_response)


@router.api_route(
    "/def/{target:path}",
    methods=["GET", "HEAD"],
    response_class=Response,
)
@handle_use_case_errors
async def get_image_with_default(
    target: str,
    container: Annotated[Container, Depends(get_container)],
) -> Response:
    """Serve an image, falling back to a named default and then the global default.

    ``target`` is ``<default_image>/<image_path>``; both parts may be empty.
    """
    default_image, _, image_path = target.partition("/")
    use_case = container[FetchImageWithDefaultUseCase]
    result = await use_case.execute(image_path=image_path, default_image=default_image)
    return result.map(image_response)
