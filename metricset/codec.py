from collections.abc import Sequence
import logging
from typing import Any

from pydantic import ValidationError

from metricset.merge import merge_metric_definitions
from metricset.schemas import MetricDefinition, MetricDefinitionListSchema

logger = logging.getLogger(__name__)


class MetricsDecodeError(ValueError):
    def __init__(self, message: str, payload: bytes | str):
        super().__init__(f'{message}: {payload[:64]!r}')
        self.payload = payload


def _is_json_error(error: ValidationError) -> bool:
    return any(item['type'] == 'json_invalid' for item in error.errors())


def parse_metric_definitions(payload: Any) -> list[MetricDefinition]:
    """Validate one chunk result, raw JSON or already decoded.

    Raw JSON may carry ``NaN``, ``Infinity`` and ``-Infinity`` values.
    """
    try:
        if isinstance(payload, bytes | str):
            return MetricDefinitionListSchema.validate_json(payload)
        return MetricDefinitionListSchema.validate_python(payload)
    except ValidationError as e:
        if _is_json_error(e):
            logger.warning('Metrics payload is not JSON', extra={'error': str(e)})
            raise MetricsDecodeError('Invalid JSON in metrics payload', payload) from e
        logger.warning(
            'Invalid metric definitions',
            extra={'error_count': e.error_count(), 'errors': e.errors()},
        )
        raise


def merge_metric_payloads(*payloads: Any) -> Sequence[MetricDefinition]:
    return merge_metric_definitions(*(parse_metric_definitions(p) for p in payloads))


def dump_metric_definitions(definitions: Sequence[MetricDefinition]) -> bytes:
    """Encode definitions as JSON, non-finite values as ``NaN``/``Infinity``."""
    return MetricDefinitionListSchema.dump_json(list(definitions))
