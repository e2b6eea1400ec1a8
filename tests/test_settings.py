from __future__ import annotations

import pytest

from modal_engine.runtime import EngineSettings, telemetry


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MODAL_ENGINE_LOG_LEVEL", "MODAL_ENGINE_MESSAGE_TTL"):
        monkeypatch.delenv(name, raising=False)

    settings = EngineSettings.from_env()

    assert settings.log_level == "INFO"
    assert settings.message_ttl == 3.0


def test_reads_prefixed_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MODAL_ENGINE_LOG_LEVEL", "debug")
    monkeypatch.setenv("MODAL_ENGINE_LOG_JSON", "yes")
    monkeypatch.setenv("MODAL_ENGINE_DISABLE_CONSOLE", "1")
    monkeypatch.setenv("MODAL_ENGINE_LOG_PRESET", " Production ")
    monkeypatch.setenv("MODAL_ENGINE_MESSAGE_TTL", "1.5")
    monkeypatch.setenv("MODAL_ENGINE_LOG_BUFFER_SIZE", "64")

    settings = EngineSettings.from_env()

    assert settings.log_level == "DEBUG"
    assert settings.log_json is True
    assert settings.console is False
    assert settings.colored is True
    assert settings.log_preset == "production"
    assert settings.message_ttl == 1.5
    assert settings.log_buffer_size == 64


def test_explicit_mapping_wins_over_environment() -> None:
    settings = EngineSettings.from_env({"MODAL_ENGINE_NO_COLOR": "true"})

    assert settings.colored is False


def test_non_numeric_values_are_rejected() -> None:
    with pytest.raises(ValueError):
        EngineSettings.from_env({"MODAL_ENGINE_MESSAGE_TTL": "soon"})


def test_invalid_values_fail_validation() -> None:
    with pytest.raises(ValueError):
        EngineSettings(message_ttl=0)


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.build_config(EngineSettings(), preset="verbose")


def test_span_reraises_block_errors() -> None:
    with pytest.raises(KeyError):
        with telemetry.span("test::span", component=True, metadata={"k": 1}):
            raise KeyError("boom")


def test_buffer_size_must_be_a_whole_number() -> None:
    with pytest.raises(ValueError):
        EngineSettings.from_env({"MODAL_ENGINE_LOG_BUFFER_SIZE": "2.5"})
