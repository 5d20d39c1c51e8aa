"""API route registrations."""

from interfaces.api.routes.fallback_routes import router as fallback_router
from interfaces.api.routes.image_routes import router as image_router
from interfaces.api.routes.landing_routes import router as landing_router

__all__ = ["fallback_router", "image_router", "landing_router"]
