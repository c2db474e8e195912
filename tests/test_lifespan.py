import logging
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

import commitai.__main__ as entrypoint
from commitai.core.config import Settings


def test_startup_and_shutdown_are_logged(app: FastAPI, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="commitai.core.lifespan"):
        with TestClient(app):
            pass

    records = [record for record in caplog.records if record.name == "commitai.core.lifespan"]
    assert [record.getMessage() for record in records] == ["CommitAI API starting", "CommitAI API stopped"]
    assert getattr(records[0], "app_env") == "local"


def test_main_runs_uvicorn_with_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []
    monkeypatch.setattr(entrypoint, "get_settings", lambda: Settings(_env_file=None, HOST="0.0.0.0", PORT=9000))
    monkeypatch.setattr(entrypoint.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

    entrypoint.main()

    assert calls == [
        (("commitai.api.app:app",), {"host": "0.0.0.0", "port": 9000, "log_config": None}),
    ]
