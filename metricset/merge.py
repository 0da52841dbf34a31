from collections.abc import Sequence
import logging

from metricset.schemas import MetricDefinition

logger = logging.getLogger(__name__)


def merge_metric_definitions(
    *arrays: Sequence[MetricDefinition],
) -> Sequence[MetricDefinition]:
    """Merge metric definition arrays by metric name.

    Values of same-named metrics are concatenated in argument order; help and
    type come from the first definition seen for a name. Used to recombine
    the partial results of zone-chunked queries.

    A single array is returned as is, so the result aliases the input.
    """
    if not arrays:
        return []
    if len(arrays) == 1:
        return arrays[0]

    by_name: dict[str, MetricDefinition] = {}
    for metrics in arrays:
        for metric in metrics:
            existing = by_name.get(metric.name)
            if existing is not None:
                existing.values.extend(metric.values)
            else:
                by_name[metric.name] = MetricDefinition.model_construct(
                    name=metric.name,
                    help=metric.help,
                    type=metric.type,
                    values=list(metric.values),
                )

    logger.debug(
        'Merged metric definitions',
        extra={'arrays': len(arrays), 'metrics': len(by_name)},
    )
    return list(by_name.values())
