from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter


class MetricType(str, Enum):
    COUNTER = 'counter'
    GAUGE = 'gauge'


class MetricValue(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan='constants')

    labels: dict[StrictStr, StrictStr]
    value: Annotated[float, Field(strict=True)]


class MetricDefinition(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan='constants')

    name: StrictStr
    help: StrictStr
    type: MetricType
    values: list[MetricValue]


MetricTypeSchema: TypeAdapter[MetricType] = TypeAdapter(MetricType)
MetricValueSchema: TypeAdapter[MetricValue] = TypeAdapter(MetricValue)
MetricDefinitionSchema: TypeAdapter[MetricDefinition] = TypeAdapter(MetricDefinition)
MetricDefinitionListSchema: TypeAdapter[list[MetricDefinition]] = TypeAdapter(
    list[MetricDefinition], config=ConfigDict(ser_json_inf_nan='constants')
)
