from __future__ import annotations

from fastapi import APIRouter

from commitai.application.status import temperature_status
from commitai.schemas.status import StatusResponse

router = APIRouter(prefix="/temperature", tags=["temperature"])


@router.get("", response_model=StatusResponse)
def get_temperature() -> StatusResponse:
    return temperature_status()
