from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from commitai.api.app import create_app
from commitai.core.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, APP_ENV="local", API_PREFIX="/api", CORS_ALLOW_ORIGINS="")


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
