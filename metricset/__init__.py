from metricset.codec import (
    MetricsDecodeError,
    dump_metric_definitions,
    merge_metric_payloads,
    parse_metric_definitions,
)
from metricset.log_config_loader import configure_logging
from metricset.merge import merge_metric_definitions
from metricset.schemas import (
    MetricDefinition,
    MetricDefinitionSchema,
    MetricType,
    MetricTypeSchema,
    MetricValue,
    MetricValueSchema,
)

__all__ = [
    'MetricDefinition',
    'MetricDefinitionSchema',
    'MetricType',
    'MetricTypeSchema',
    'MetricValue',
    'MetricValueSchema',
    'MetricsDecodeError',
    'configure_logging',
    'dump_metric_definitions',
    'merge_metric_definitions',
    'merge_metric_payloads',
    'parse_metric_definitions',
]
