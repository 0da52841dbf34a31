import logging

import pytest

from metricset.schemas import MetricValue


@pytest.fixture
def us_value() -> MetricValue:
    return MetricValue(labels={'zone': 'us'}, value=10)


@pytest.fixture
def eu_value() -> MetricValue:
    return MetricValue(labels={'zone': 'eu'}, value=5)


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
