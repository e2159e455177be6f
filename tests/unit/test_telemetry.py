"""Tests for telemetry helpers that do not install a global tracer provider."""

import pytest
from opentelemetry.sdk.trace.export import ConsoleSpanExporter

from app.core.config import Settings
from app.shared.telemetry.telemetry import TelemetryConfig
from app.shared.telemetry.tracing import get_trace_id, traced


def test_from_settings() -> None:
    settings = Settings(
        _env_file=None,
        membership_backend="file",
        membership_snapshot_path="members.json",
        telemetry_exporter="otlp",
        telemetry_otlp_endpoint="http://collector:4317",
        telemetry_sample_rate=0.25,
    )
    config = TelemetryConfig.from_settings(settings)
    assert config.service_name == "people-directory"
    assert config.exporter_type == "otlp"
    assert config.otlp_endpoint == "http://collector:4317"
    assert config.sample_rate == 0.25


def test_none_exporter() -> None:
    assert TelemetryConfig("svc", "1.0", exporter_type="none")._build_exporter() is None


@pytest.mark.parametrize(
    ("exporter_type", "endpoint"),
    [("console", None), ("otlp", None), ("jaeger", None)],
)
def test_console_exporter_fallbacks(exporter_type: str, endpoint) -> None:
    config = TelemetryConfig("svc", "1.0", exporter_type=exporter_type, otlp_endpoint=endpoint)
    assert isinstance(config._build_exporter(), ConsoleSpanExporter)


def test_instrument_without_provider_is_noop() -> None:
    config = TelemetryConfig("svc", "1.0")
    config.instrument(app=None)  # type: ignore[arg-type]
    config.shutdown()
    assert config.tracer_provider is None


async def test_traced_passes_through_result_and_errors() -> None:
    @traced("test.op")
    async def double(value: int) -> int:
        return value * 2

    @traced()
    async def fail() -> None:
        raise RuntimeError("boom")

    assert await double(21) == 42
    assert double.__name__ == "double"
    with pytest.raises(RuntimeError):
        await fail()


def test_trace_id_none_outside_span() -> None:
    assert get_trace_id() is None
