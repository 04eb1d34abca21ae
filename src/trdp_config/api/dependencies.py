# src/trdp_config/api/dependencies.py
from fastapi import Request
from typing import Annotated
from fastapi import Depends
from ..storage.config_store import ConfigStore
from ..core.summary_extractor import ConfigSummaryExtractor
from ..core.engine_controller import EngineController

async def get_config_store(request: Request) -> ConfigStore:
    return request.app.state.components.config_store

async def get_extractor(request: Request) -> ConfigSummaryExtractor:
    return request.app.state.components.extractor

async def get_engine_controller(request: Request) -> EngineController:
    return request.app.state.components.engine_controller

async def get_max_upload_bytes(request: Request) -> int:
    return request.app.state.components.max_upload_bytes

# Type definitions for dependencies
ConfigStoreDependency = Annotated[ConfigStore, Depends(get_config_store)]
ExtractorDependency = Annotated[ConfigSummaryExtractor, Depends(get_extractor)]
EngineDependency = Annotated[EngineController, Depends(get_engine_controller)]
MaxUploadDependency = Annotated[int, Depends(get_max_upload_bytes)]
