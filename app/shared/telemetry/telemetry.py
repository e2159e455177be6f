"""OpenTelemetry tracing for the people directory.

One TelemetryConfig per process, built from settings in create_app() and
shut down by the lifespan. Inbound requests (FastAPI), outbound provider
calls (httpx) and log records (trace_id/span_id) are instrumented.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

# Matched as a search pattern, so it also covers /api/v1/health/ready.
_EXCLUDED_URLS = "/api/v1/health"


class TelemetryConfig:
    """Tracer provider plus instrumentation for one service process.

    Exporters: "console" (development), "otlp" (gRPC collector) or "none"
    (spans are created and sampled but not exported).
    """

    def __init__(
        self,
        service_name: str,
        service_version: str,
        environment: str = "development",
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.environment = environment
        self.exporter_type = exporter_type
        self.otlp_endpoint = otlp_endpoint
        self.sample_rate = sample_rate
        self.tracer_provider: TracerProvider | None = None

    @classmethod
    def from_settings(cls, settings: "Settings") -> "TelemetryConfig":
        return cls(
            service_name=settings.app_name,
            service_version=settings.app_version,
            environment=settings.telemetry_environment,
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )

    def _build_exporter(self) -> SpanExporter | None:
        """Return the span exporter for exporter_type, or None for "none"."""
        if self.exporter_type == "none":
            return None
        if self.exporter_type == "otlp":
            if self.otlp_endpoint:
                logger.info("Using OTLP span exporter: %s", self.otlp_endpoint)
                return OTLPSpanExporter(
                    endpoint=self.otlp_endpoint,
                    insecure=self.otlp_endpoint.startswith("http://"),
                )
            logger.warning("TELEMETRY_OTLP_ENDPOINT not set, using console exporter")
        elif self.exporter_type != "console":
            logger.warning("Unknown exporter type '%s', using console", self.exporter_type)
        return ConsoleSpanExporter()

    def setup(self) -> TracerProvider | None:
        """Create the tracer provider and install it globally.

        Failures are logged and leave tracing off; the service runs without it.
        """
        try:
            provider = TracerProvider(
                resource=Resource(
                    attributes={
                        SERVICE_NAME: self.service_name,
                        SERVICE_VERSION: self.service_version,
                        "deployment.environment": self.environment,
                    }
                ),
                sampler=ParentBased(TraceIdRatioBased(self.sample_rate)),
            )
            exporter = self._build_exporter()
            if exporter is not None:
                provider.add_span_processor(BatchSpanProcessor(exporter))
            trace.set_tracer_provider(provider)
        except Exception as e:
            logger.exception("Failed to initialize telemetry: %s", e)
            return None
        self.tracer_provider = provider
        logger.info(
            "OpenTelemetry initialized: service=%s, exporter=%s, sample_rate=%s",
            self.service_name,
            self.exporter_type,
            self.sample_rate,
        )
        return provider

    def instrument(self, app: FastAPI) -> None:
        """Instrument inbound requests, outbound provider calls and log records.

        Must run before the app starts serving (the middleware stack is built
        on the first request).
        """
        if self.tracer_provider is None:
            return
        try:
            FastAPIInstrumentor.instrument_app(
                app,
                tracer_provider=self.tracer_provider,
                excluded_urls=_EXCLUDED_URLS,
            )
            HTTPXClientInstrumentor().instrument(tracer_provider=self.tracer_provider)
            LoggingInstrumentor().instrument(
                tracer_provider=self.tracer_provider,
                set_logging_format=False,
            )
        except Exception as e:
            logger.exception("Failed to instrument application: %s", e)
            return
        logger.info("FastAPI, httpx and logging instrumentation enabled")

    def shutdown(self) -> None:
        """Flush pending spans and shut the tracer provider down."""
        if self.tracer_provider is None:
            return
        try:
            self.tracer_provider.shutdown()
        except Exception as e:
            logger.exception("Error during telemetry shutdown: %s", e)
        self.tracer_provider = None


_telemetry: TelemetryConfig | None = None
_telemetry_lock = threading.RLock()


def get_telemetry() -> TelemetryConfig | None:
    """Return the process telemetry instance, if tracing was set up."""
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None) -> None:
    """Set (or clear, with None) the process telemetry instance."""
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry
