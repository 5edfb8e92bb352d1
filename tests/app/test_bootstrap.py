"""Testes do bootstrap: settings de ambiente chegando em logs e rotas."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from api.routes.health.router import health_check
from app.app import create_app
from app.bootstrap import initialize_app
from config.settings import get_base_settings, get_upstream_settings
from tests.fakes.fake_upstream_client import FakeUpstreamClient


@pytest.fixture(autouse=True)
def _isolate_settings_and_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    get_base_settings.cache_clear()
    get_upstream_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_upstream_settings.cache_clear()
    root.handlers = handlers
    root.setLevel(level)


@pytest.mark.asyncio
async def test_service_name_reaches_logs_and_health(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SERVICE_NAME", "gateway-arquivos")

    initialize_app()
    handler = logging.getLogger().handlers[0]
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)
    for log_filter in handler.filters:
        log_filter.filter(record)
    health = await health_check()

    assert record.service == "gateway-arquivos"
    assert health.service == "gateway-arquivos"


def test_log_level_comes_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "warning")

    initialize_app()

    assert logging.getLogger().level == logging.WARNING


@pytest.mark.parametrize(("raw", "expected"), [("true", True), ("false", False)])
def test_debug_flag_reaches_fastapi(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool
) -> None:
    monkeypatch.setenv("DEBUG", raw)

    app = create_app(upstream_client=FakeUpstreamClient())

    assert app.debug is expected
