"""API routers."""

from commitai.api.routers.ai import router as ai_router
from commitai.api.routers.temperature import router as temperature_router

__all__ = ["ai_router", "temperature_router"]
