"""API routers."""
from convertaphile.interfaces.api.routers.conversion import router as conversion_router

__all__ = ["conversion_router"]
