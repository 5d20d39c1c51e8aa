from fastapi import APIRouter, HTTPException, status

router = APIRouter(include_in_schema=False)


@router.api_route(
    "/{path:path}",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
)
async def invalid_request(path: str) -> None:  # noqa: ARG001
    """Reject every request no other route matched. Must be registered last."""
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid request")
