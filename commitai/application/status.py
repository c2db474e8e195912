from __future__ import annotations

import logging

from commitai.core.constants import AI_STATUS_MESSAGE, AI_VERSION_MESSAGE, TEMPERATURE_MESSAGE
from commitai.schemas.status import StatusResponse

logger = logging.getLogger(__name__)


def ai_status() -> StatusResponse:
    logger.debug("ai status requested")
    return StatusResponse(status=AI_STATUS_MESSAGE)


def ai_version() -> StatusResponse:
    logger.debug("ai version requested")
    return StatusResponse(status=AI_VERSION_MESSAGE)


def temperature_status() -> StatusResponse:
    logger.debug("temperature requested")
    return StatusResponse(status=TEMPERATURE_MESSAGE)
