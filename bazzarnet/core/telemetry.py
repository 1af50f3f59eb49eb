"""
OpenTelemetry instrumentation for FastAPI and PyMongo.

Spans are created for incoming requests and MongoDB commands; export is
configured through the standard OTEL_* environment variables.
"""

from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.pymongo import PymongoInstrumentor

from bazzarnet.core.logger import logger


def instrument_app(app):
    """
    Instrument FastAPI application with OpenTelemetry for automatic span creation.

    Args:
        app: FastAPI application instance
    """
    try:
        FastAPIInstrumentor.instrument_app(app)
        logger.info("FastAPI instrumented with OpenTelemetry")

        PymongoInstrumentor().instrument()
        logger.info("PyMongo instrumented with OpenTelemetry")
    except Exception as e:
        # Tracing is optional; the service must still start
        logger.error(
            "Failed to instrument application",
            error=e,
            metadata={"event": "telemetry_instrumentation_failed"}
        )
