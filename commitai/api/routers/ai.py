from __future__ import annotations

from fastapi import APIRouter

from commitai.application.status import ai_status, ai_version
from commitai.schemas.status import StatusResponse

router = APIRouter(prefix="/ai", tags=["ai"])


@router.get("", response_model=StatusResponse)
def get_status() -> StatusResponse:
    return ai_status()


@router.get("/version", response_model=StatusResponse)
def get_version() -> StatusResponse:
    return ai_version()
