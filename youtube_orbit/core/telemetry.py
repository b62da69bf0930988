from __future__ import annotations

import logging

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from youtube_orbit.core.config import Settings


log = logging.getLogger(__name__)


def setup_telemetry(settings: Settings) -> TracerProvider | None:
    if not settings.otlp_endpoint:
        log.debug("telemetry: otlp_endpoint not set, tracing disabled")
        return None

    resource = Resource.create({"service.name": settings.service_name, "deployment.environment": settings.env})
    provider = TracerProvider(resource=resource)
    processor = BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{settings.otlp_endpoint}/v1/traces"))
    provider.add_span_processor(processor)
    trace.set_tracer_provider(provider)

    HTTPXClientInstrumentor().instrument()
    log.info("telemetry: exporting traces to %s", settings.otlp_endpoint)
    return provider
