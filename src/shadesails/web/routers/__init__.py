"""API routers for the REST API."""

from shadesails.web.routers.calculate import router as calculate_router
from shadesails.web.routers.measurements import router as measurements_router
from shadesails.web.routers.validate import router as validate_router

__all__ = [
    "calculate_router",
    "measurements_router",
    "validate_router",
]
