"""Tests for container wiring."""

import asyncio

import pytest

from aurafit.config import Settings
from aurafit.containers import build_container, load_settings
from aurafit.domain.errors import ConfigurationError


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    log = container.tracker_service.store.snapshot
    assert container.coach_service.model == settings.openai_model
    assert log.base_weight == 70
    assert log.current_weight == 70
    assert log.sleep_hours == 7.5
    assert log.goal == "Lose belly fat and gain lean muscle"
    asyncio.run(container.close_resources())


def test_missing_api_key_is_configuration_error(
    monkeypatch: pytest.MonkeyPatch, tmp_path
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    with pytest.raises(ConfigurationError):
        load_settings()
    with pytest.raises(ConfigurationError):
        build_container()


def test_blank_api_key_is_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        build_container(Settings(openai_api_key="  "))
