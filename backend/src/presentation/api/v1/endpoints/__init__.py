"""
API V1 Endpoints Package
Exports routers used by main app
"""
from .admin import router as admin_router
from .candidates import router as candidates_router
from .employers import router as employers_router
from .jobs import router as jobs_router

__all__ = [
    "admin_router",
    "candidates_router",
    "employers_router",
    "jobs_router"
]
