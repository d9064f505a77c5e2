from .catalog import router as catalog_routes
from .loading import router as loading_routes

__all__ = [
    "catalog_routes",
    "loading_routes",
]
