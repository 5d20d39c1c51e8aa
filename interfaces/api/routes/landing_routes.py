from fastapi import APIRouter, Response

from infrastructure.config import settings

router = APIRouter(tags=["landing"])

LANDING_PAGE = """<!DOCTYPE html>
<html>
<head>
	<title>{title}</title>
	<style>
		body {{ font-family: sans-serif; padding: 2rem; background: #f9f9f9; }}
		h1 {{ color: #2c3e50; }}
		code {{ background: #eef; padding: 0.2rem 0.4rem; border-radius: 4px; }}
	</style>
</head>
<body>
	<h1>Welcome to the {title}</h1>
	<p>Images are served from object storage via:</p>
	<ul>
		<li><code>/images/&lt;path&gt;</code> - direct image path</li>
		<li><code>/def/&lt;default&gt;/&lt;path&gt;</code> - with fallback to a default image</li>
	</ul>
</body>
</html>
"""


@router.get("/", include_in_schema=False)
@router.get("/index.html", include_in_schema=False)
async def landing_page() -> Response:
    return Response(
        content=LANDING_PAGE.format(title=settings.app_name),
        media_type="text/html; charset=UTF-8",
    )
