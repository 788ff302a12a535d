from __future__ import annotations

import pytest

from wrap_buffer.runtime import telemetry


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_unknown_preset_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_logger_is_cached() -> None:
    assert telemetry.get_logger("wrap_buffer.test") is telemetry.get_logger(
        "wrap_buffer.test"
    )


def test_span_reraises_errors() -> None:
    with pytest.raises(KeyError):
        with telemetry.span("test::span", component=True, metadata={"k": 1}) as handle:
            handle.add_metadata("extra", [1, 2])
            raise KeyError("boom")


def test_public_surface() -> None:
    assert set(telemetry.__all__) == {
        "PRESETS",
        "SpanHandle",
        "configure",
        "get_logger",
        "record_event",
        "span",
    }
    assert not hasattr(telemetry, "logger")
    assert not hasattr(telemetry.SpanHandle, "cancel")
