import logging

import pytest

from app.core.config import Settings
from app.core.logging import configure_logging
from app.data.cities import CITY_NAME_MAPPING, supported_city_ids


def test_defaults(monkeypatch):
    for var in ("CWA_API_KEY", "PORT", "ENV"):
        monkeypatch.delenv(var, raising=False)

    cfg = Settings(_env_file=None)

    assert cfg.cwa_api_key == ""
    assert cfg.port == 3000
    assert cfg.env == "development"
    assert cfg.cwa_api_base_url == "https://opendata.cwa.gov.tw/api"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CWA_API_KEY", "CWA-ABC")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ENV", "production")

    cfg = Settings(_env_file=None)

    assert cfg.cwa_api_key == "CWA-ABC"
    assert cfg.port == 8080
    assert cfg.env == "production"


def test_city_table_is_read_only():
    with pytest.raises(TypeError):
        CITY_NAME_MAPPING["tokyo"] = "東京"  # type: ignore[index]
    assert "tokyo" not in CITY_NAME_MAPPING


def test_city_ids_are_lowercase():
    ids = supported_city_ids()
    assert ids == [c.lower() for c in ids]
    assert len(ids) == len(set(ids)) == 6


def test_httpx_request_logs_silenced():
    configure_logging("DEBUG")
    assert logging.getLogger("httpx").getEffectiveLevel() == logging.WARNING
