from document_checklist_service.app.config import settings
import logging
from opentelemetry import trace, metrics
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader, ConsoleMetricExporter
from opentelemetry.sdk.resources import Resource, SERVICE_NAME as ResourceAttributesServiceName
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter
from pythonjsonlogger import jsonlogger


logger = logging.getLogger("document_checklist_service")

JSON_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(module)s %(funcName)s %(lineno)d %(otelTraceID)s %(otelSpanID)s %(message)s"
JSON_HANDLER_NAME = "document_checklist_json"

def setup_json_logging(service_name: str = settings.SERVICE_NAME_API):
    """Routes every log record through a single JSON handler on the root logger (idempotent)."""
    root_logger = logging.getLogger()
    if any(getattr(h, "name", None) == JSON_HANDLER_NAME for h in root_logger.handlers):
        return
    json_handler = logging.StreamHandler()
    json_handler.name = JSON_HANDLER_NAME
    json_handler.setFormatter(jsonlogger.JsonFormatter(
        fmt=JSON_LOG_FORMAT,
        rename_fields={"levelname": "level", "name": "logger_name", "asctime": "timestamp"},
        static_fields={"service": service_name},
    ))
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    root_logger.addHandler(json_handler)

    log_level = settings.LOG_LEVEL.upper()
    root_logger.setLevel(log_level)
    logger.setLevel(log_level)
    # Per-request client lines are only useful while debugging
    logging.getLogger("httpx").setLevel(log_level if log_level == "DEBUG" else "WARNING")
    logger.info(f"JSON logging configured at level {log_level} for {service_name}.")

def setup_opentelemetry(service_name: str):
    resource = Resource(attributes={
        ResourceAttributesServiceName: service_name,
    })
    tracer_provider = TracerProvider(resource=resource)
    tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    if settings.OTEL_EXPORTER_OTLP_TRACES_ENDPOINT:
        logger.info(f"Configuring OTLP Span Exporter. Endpoint: {settings.OTEL_EXPORTER_OTLP_TRACES_ENDPOINT}")
        otlp_span_exporter = OTLPSpanExporter(endpoint=settings.OTEL_EXPORTER_OTLP_TRACES_ENDPOINT, insecure=True)
        tracer_provider.add_span_processor(BatchSpanProcessor(otlp_span_exporter))
    else:
        logger.info("OTLP Span Exporter not configured. Using Console for spans.")
    trace.set_tracer_provider(tracer_provider)
    logger.info(f"OpenTelemetry TracerProvider configured for service: {service_name}.")

    metric_readers = [PeriodicExportingMetricReader(ConsoleMetricExporter(), export_interval_millis=5000)]
    if settings.OTEL_EXPORTER_OTLP_METRICS_ENDPOINT:
        logger.info(f"Configuring OTLP Metric Exporter. Endpoint: {settings.OTEL_EXPORTER_OTLP_METRICS_ENDPOINT}")
        otlp_metric_exporter = OTLPMetricExporter(endpoint=settings.OTEL_EXPORTER_OTLP_METRICS_ENDPOINT, insecure=True)
        metric_readers.append(PeriodicExportingMetricReader(otlp_metric_exporter, export_interval_millis=5000))
    else:
        logger.info("OTLP Metric Exporter not configured. Using Console for metrics.")
    meter_provider = MeterProvider(resource=resource, metric_readers=metric_readers)
    metrics.set_meter_provider(meter_provider)
    logger.info(f"OpenTelemetry MeterProvider configured for service: {service_name}.")

# Call at module load time
setup_json_logging()

# --- Tracer and Meter instances ---
# Proxies until setup_opentelemetry is called by an entry point.
tracer = trace.get_tracer("document_checklist_service.tracer")
meter = metrics.get_meter("document_checklist_service.meter")

# --- Custom Metrics Definitions ---
checklist_builds_counter = meter.create_counter(
    name="checklist.builds.total",
    description="Counts checklist projections, partitioned by kind (templated, case, party, ad_hoc).",
    unit="1"
)

checklist_rows_counter = meter.create_counter(
    name="checklist.rows.total",
    description="Counts checklist rows produced by projections.",
    unit="1"
)

requirements_fetch_counter = meter.create_counter(
    name="checklist.requirements.fetch.total",
    description="Counts requirement template fetches, partitioned by outcome.",
    unit="1"
)
logger.info("Custom metrics defined in observability.py.")


def record_checklist_build(kind: str, row_count: int):
    checklist_builds_counter.add(1, {"checklist.kind": kind})
    checklist_rows_counter.add(row_count, {"checklist.kind": kind})
