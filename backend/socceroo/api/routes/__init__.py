"""
API route modules.
"""

from .groups_routes import router as groups_router
from .simulations_routes import router as simulations_router

__all__ = ["groups_router", "simulations_router"]
