"""API module exports."""

from taxspine.api.health import router as health_router
from taxspine.api.returns import router as returns_router

__all__ = [
    "health_router",
    "returns_router",
]
