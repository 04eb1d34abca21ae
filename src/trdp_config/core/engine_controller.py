# Runtime engine lifecycle
from typing import Dict, FrozenSet, Optional
import asyncio
from datetime import datetime, timezone

from ..models.config_entry import EngineState, EngineStatus
from ..utils.exceptions import EngineStateError
from ..utils.logging import get_logger

logger = get_logger(__name__)

ALLOWED_TRANSITIONS: Dict[EngineState, FrozenSet[EngineState]] = {
    EngineState.STOPPED: frozenset({EngineState.STARTING}),
    EngineState.STARTING: frozenset({EngineState.RUNNING, EngineState.STOPPED}),
    EngineState.RUNNING: frozenset({EngineState.STOPPED}),
}


class EngineController:
    '''
    Holds the activated configuration and the running state of the
    communication engine. One instance is created at startup and shared
    through the application state.
    '''

    def __init__(self, restart_delay: float = 0.025):
        self.restart_delay = restart_delay
        self.active_config: Optional[bytes] = None
        self.active_config_id: Optional[str] = None
        self.state = EngineState.STOPPED
        self.last_restart: Optional[datetime] = None
        self._restart_lock = asyncio.Lock()

    @property
    def running(self) -> bool:
        return self.state == EngineState.RUNNING

    async def load_config(self, content: bytes, config_id: Optional[str] = None) -> None:
        """Hand an activated raw document to the engine; takes effect on restart"""
        self.active_config = content
        self.active_config_id = config_id
        logger.info(f"Activated configuration {config_id or '<unnamed>'} ({len(content)} bytes)")

    async def restart(self) -> EngineStatus:
        """
        Restart the engine: stop if running, then stopped -> starting -> running.

        Raises:
            EngineStateError: If a restart is already in progress
        """
        if self._restart_lock.locked():
            raise EngineStateError("Engine restart already in progress")

        async with self._restart_lock:
            if self.state == EngineState.RUNNING:
                self._transition(EngineState.STOPPED)
            self._transition(EngineState.STARTING)
            try:
                await asyncio.sleep(self.restart_delay)
            except asyncio.CancelledError:
                self._transition(EngineState.STOPPED)
                raise
            self._transition(EngineState.RUNNING)
            self.last_restart = datetime.now(timezone.utc)

        return self.get_status()

    def _transition(self, target: EngineState) -> None:
        if target not in ALLOWED_TRANSITIONS[self.state]:
            raise EngineStateError(f"Invalid engine transition {self.state.value} -> {target.value}")
        logger.info(f"Engine state {self.state.value} -> {target.value}")
        self.state = target

    def get_status(self) -> EngineStatus:
        return EngineStatus(
            state=self.state,
            running=self.running,
            active_config_id=self.active_config_id,
            last_restart=self.last_restart,
        )
