import pytest
from pydantic import ValidationError

from commitai.application.status import ai_status, ai_version, temperature_status
from commitai.schemas.status import StatusResponse


def test_status_must_not_be_empty() -> None:
    with pytest.raises(ValidationError):
        StatusResponse(status="")


def test_status_response_is_frozen() -> None:
    response = ai_status()
    with pytest.raises(ValidationError):
        response.status = "changed"


def test_each_builder_returns_a_fresh_response() -> None:
    first = ai_version()
    second = ai_version()
    assert first == second
    assert first is not second


def test_builders_are_distinct() -> None:
    messages = {ai_status().status, ai_version().status, temperature_status().status}
    assert len(messages) == 3
