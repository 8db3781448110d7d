# nlg_realiser\shared\observability.py
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from nlg_realiser.shared.config import settings


def setup_observability() -> TracerProvider:
    """
    Configures OpenTelemetry for the realiser.

    1. Sets the Global Tracer Provider.
    2. Attaches a console exporter when DEBUG is on.

    Without this call the API falls back to a no-op provider, and the
    spans opened by the realiser cost nothing.
    """
    resource = Resource.create(attributes={
        "service.name": settings.OTEL_SERVICE_NAME,
        "service.environment": settings.APP_ENV.value,
    })

    provider = TracerProvider(resource=resource)

    if settings.DEBUG:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    return provider


def get_tracer(name: str):
    """
    Utility to get a tracer for manual instrumentation.
    Usage:
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("realise_sentence"):
            ...
    """
    return trace.get_tracer(name)
