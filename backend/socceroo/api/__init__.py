"""
API module.
"""

from .routes import groups_router, simulations_router

__all__ = [
    "groups_router",
    "simulations_router",
]
