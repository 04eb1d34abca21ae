from fastapi import APIRouter, HTTPException
from ...models.config_entry import EngineStatus
from ...utils.exceptions import EngineStateError
from ...utils.logging import get_logger
from ..dependencies import EngineDependency

logger = get_logger(__name__)

engine_router = APIRouter()


@engine_router.get("/engine/status", response_model=EngineStatus)
async def get_engine_status(engine: EngineDependency) -> EngineStatus:
    return engine.get_status()


@engine_router.post("/engine/restart", response_model=EngineStatus)
async def restart_engine(engine: EngineDependency) -> EngineStatus:
    try:
        return await engine.restart()
    except EngineStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        logger.error(f"Error restarting engine: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to restart engine: {str(e)}")
