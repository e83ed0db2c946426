"""
Router package for the Training Log API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- training_log: Training-log parsing and persistence
"""

from api.routers.health import router as health_router
from api.routers.training_log import router as training_log_router

__all__ = [
    "health_router",
    "training_log_router",
]
