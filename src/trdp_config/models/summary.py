from enum import Enum
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..utils.helpers import Number


class Direction(str, Enum):
    SOURCE_SINK = "source+sink"
    SOURCE = "source"
    SINK = "sink"
    UNSET = "unset"


class SummaryModel(BaseModel):
    """Immutable base; JSON keys are camelCase, attributes snake_case"""
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class Device(SummaryModel):
    host_name: str = ""
    type: str = ""


class Telegram(SummaryModel):
    name: str = ""
    com_id: Optional[Number] = None
    dataset_id: Optional[Number] = None
    cycle: Optional[Number] = None
    direction: Direction = Direction.UNSET


class BusInterface(SummaryModel):
    name: str = ""
    network_id: Optional[Number] = None
    host_ip: str = ""
    pd_telegrams: Tuple[Telegram, ...] = ()
    md_telegrams: Tuple[Telegram, ...] = ()


class Dataset(SummaryModel):
    id: Optional[Number] = None
    name: str = ""
    element_count: int = Field(default=0, ge=0)


class ConfigSummary(SummaryModel):
    device: Device = Device()
    interfaces: Tuple[BusInterface, ...] = ()
    datasets: Tuple[Dataset, ...] = ()
