import asyncio
from datetime import datetime, timezone
from pathlib import Path
from typing import List

from ..models.config_entry import ConfigEntry
from ..storage.config_repository import ConfigMetadataRepository
from ..storage.database import ConnectionPool
from ..utils.exceptions import ConfigNotFoundError, IOUnavailable
from ..utils.helpers import generate_config_id, stored_file_name
from ..utils.logging import get_logger

logger = get_logger(__name__)


class ConfigStore:
    """Stores uploaded configuration documents on disk with their metadata"""
    def __init__(self, configs_dir: str, db_path: str, max_connections: int = 3):
        self.configs_dir = Path(configs_dir)
        self.pool = ConnectionPool(db_path, max_connections)
        self.repository = ConfigMetadataRepository(self.pool)

    async def initialize(self) -> None:
        self.configs_dir.mkdir(parents=True, exist_ok=True)
        await self.pool.initialize()
        await self.repository.create_table()
        logger.info(f"Configuration store ready at {self.configs_dir}")

    async def save(self, filename: str, content: bytes) -> ConfigEntry:
        """
        Write an uploaded document to disk and record its metadata.

        Args:
            filename: Name of the file as uploaded
            content: Raw document bytes

        Returns:
            The metadata entry of the stored document
        """
        config_id = generate_config_id()
        entry = ConfigEntry(
            id=config_id,
            filename=filename,
            stored_name=stored_file_name(config_id, filename),
            uploaded_at=datetime.now(timezone.utc),
        )
        path = self.configs_dir / entry.stored_name
        await asyncio.to_thread(path.write_bytes, content)
        try:
            await self.repository.add_entry(entry)
        except Exception:
            path.unlink(missing_ok=True)
            raise

        logger.info(f"Stored configuration {filename} as {entry.stored_name}")
        return entry

    async def list_entries(self) -> List[ConfigEntry]:
        return await self.repository.list_entries()

    async def get_entry(self, config_id: str) -> ConfigEntry:
        entry = await self.repository.get_entry(config_id)
        if entry is None:
            raise ConfigNotFoundError(f"Configuration {config_id} not found")
        return entry

    async def read_document(self, config_id: str) -> bytes:
        """
        Read the full content of a stored document.

        Raises:
            ConfigNotFoundError: If no metadata exists for config_id
            IOUnavailable: If the stored file cannot be read
        """
        entry = await self.get_entry(config_id)
        path = self.configs_dir / entry.stored_name
        try:
            return await asyncio.to_thread(self._read_bytes, path)
        except OSError as e:
            logger.error(f"Failed to read configuration file {path}: {e}")
            raise IOUnavailable(f"Configuration file for {config_id} could not be read: {e}") from e

    @staticmethod
    def _read_bytes(path: Path) -> bytes:
        with open(path, 'rb') as f:
            return f.read()

    async def close(self) -> None:
        await self.pool.close()
