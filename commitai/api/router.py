from fastapi import APIRouter

from commitai.api.routers import ai_router, temperature_router


def endpoint_routers() -> list[APIRouter]:
    return [ai_router, temperature_router]
