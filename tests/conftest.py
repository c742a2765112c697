"""Shared test fixtures."""

import copy
import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_settings
from app.core.config import Settings
from app.main import app

FIXTURE_DIR = Path(__file__).parent / "fixtures"

CWA_BASE_URL = "https://cwa.test/api"
FORECAST_URL = f"{CWA_BASE_URL}/v1/rest/datastore/F-C0032-001"
API_KEY = "CWA-TEST-KEY-0000"


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(scope="session")
def _taipei_payload() -> dict:
    with open(FIXTURE_DIR / "cwa_forecast_taipei.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def taipei_payload(_taipei_payload: dict) -> dict:
    """Fresh copy of a three-slot F-C0032-001 response for 臺北市."""
    return copy.deepcopy(_taipei_payload)


def make_settings(api_key: str = API_KEY) -> Settings:
    return Settings(_env_file=None, cwa_api_key=api_key, cwa_api_base_url=CWA_BASE_URL)


@pytest.fixture
def client():
    app.dependency_overrides[get_settings] = lambda: make_settings()
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def unconfigured_client():
    app.dependency_overrides[get_settings] = lambda: make_settings(api_key="")
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
