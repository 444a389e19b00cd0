import json
import logging

import pytest
from fastapi import HTTPException
from pydantic_settings import SettingsConfigDict

import config
from kitchenpos.app.domain import Err, ErrorKind, Ok
from kitchenpos.app.obs.logging import JsonFormatter
from kitchenpos.app.utils.responses import err, unwrap


@pytest.mark.parametrize(
    "kind,status",
    [
        (ErrorKind.INVALID_ARGUMENT, 400),
        (ErrorKind.NOT_FOUND, 404),
        (ErrorKind.CONFLICT, 409),
    ],
)
def test_unwrap_maps_error_kinds(kind, status):
    with pytest.raises(HTTPException) as info:
        unwrap(Err(kind, "nope"))
    assert info.value.status_code == status
    assert info.value.detail == "nope"


def test_unwrap_returns_value():
    assert unwrap(Ok("x")) == "x"


def test_err_envelope():
    body = err(409, "busy")
    assert body == {"ok": False, "request_id": None, "error": {"code": 409, "message": "busy"}}


def test_json_formatter_includes_extras():
    record = logging.LogRecord("kitchenpos", logging.INFO, __file__, 1, "hello %s", ("x",), None)
    record.status = 200
    data = json.loads(JsonFormatter().format(record))
    assert data["msg"] == "hello x"
    assert data["status"] == 200
    assert data["level"] == "INFO"


def test_settings_env_override(monkeypatch):
    monkeypatch.setenv("APP_ENV", "staging")
    config.get_settings.cache_clear()
    try:
        assert config.get_settings().app_env == "staging"
    finally:
        config.get_settings.cache_clear()


def test_settings_json_file_below_env(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"app_env": "qa", "port": 9000}))

    class FileSettings(config.Settings):
        model_config = SettingsConfigDict(json_file=path)

    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    assert FileSettings().app_env == "qa"
    assert FileSettings().port == 9000

    monkeypatch.setenv("PORT", "9100")
    assert FileSettings().port == 9100


def test_settings_without_json_file(tmp_path, monkeypatch):
    class NoFileSettings(config.Settings):
        model_config = SettingsConfigDict(json_file=tmp_path / "missing.json")

    monkeypatch.delenv("APP_ENV", raising=False)
    assert NoFileSettings().app_env == "dev"


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
