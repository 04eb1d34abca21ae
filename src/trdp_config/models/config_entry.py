from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class ConfigEntry(ApiModel):
    """Metadata of one stored configuration document"""
    id: str
    filename: str
    stored_name: str
    uploaded_at: datetime


class ConfigListItem(ApiModel):
    id: str
    filename: str
    uploaded_at: datetime

    @classmethod
    def from_entry(cls, entry: ConfigEntry) -> "ConfigListItem":
        return cls(id=entry.id, filename=entry.filename, uploaded_at=entry.uploaded_at)


class EngineState(str, Enum):
    STOPPED = "stopped"
    STARTING = "starting"
    RUNNING = "running"


class EngineStatus(ApiModel):
    state: EngineState
    running: bool
    active_config_id: Optional[str] = None
    last_restart: Optional[datetime] = None
