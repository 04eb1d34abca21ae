from typing import Any, Dict, List, Optional
from datetime import datetime

from ..models.config_entry import ConfigEntry
from ..storage.database import ConnectionPool
from ..utils.logging import get_logger
from ..utils.exceptions import DatabaseError


logger = get_logger(__name__)


class ConfigMetadataRepository:
    """Metadata rows for uploaded configuration documents"""
    def __init__(self, pool: ConnectionPool):
        self.pool = pool
        self.table_name = "config_documents"

    async def create_table(self) -> None:
        async with self.pool.acquire() as conn:
            await conn.execute('''
                CREATE TABLE IF NOT EXISTS config_documents (
                    seq INTEGER PRIMARY KEY AUTOINCREMENT,
                    id TEXT NOT NULL UNIQUE,
                    filename TEXT NOT NULL,
                    stored_name TEXT NOT NULL,
                    uploaded_at TIMESTAMP NOT NULL
                )
            ''')
            await conn.commit()

    async def add_entry(self, entry: ConfigEntry) -> None:
        try:
            async with self.pool.acquire() as conn:
                await conn.execute('''
                    INSERT INTO config_documents (id, filename, stored_name, uploaded_at)
                    VALUES (?, ?, ?, ?)
                ''', (
                    entry.id,
                    entry.filename,
                    entry.stored_name,
                    entry.uploaded_at.isoformat()
                ))
                await conn.commit()
                logger.debug(f"Stored metadata for configuration {entry.id}")
        except Exception as e:
            logger.error(f"Failed to store configuration metadata: {e}")
            raise DatabaseError(f"Failed to store configuration metadata: {e}")

    async def list_entries(self) -> List[ConfigEntry]:
        """All entries in upload order"""
        try:
            async with self.pool.acquire() as conn:
                async with conn.execute(
                    'SELECT id, filename, stored_name, uploaded_at FROM config_documents ORDER BY seq'
                ) as cursor:
                    rows = await cursor.fetchall()
                    return [self._row_to_entry(dict(row)) for row in rows]
        except Exception as e:
            logger.error(f"Failed to list configuration metadata: {e}")
            raise DatabaseError(f"Failed to list configuration metadata: {e}")

    async def get_entry(self, config_id: str) -> Optional[ConfigEntry]:
        try:
            async with self.pool.acquire() as conn:
                async with conn.execute(
                    'SELECT id, filename, stored_name, uploaded_at FROM config_documents WHERE id = ?',
                    (config_id,)
                ) as cursor:
                    row = await cursor.fetchone()
                    return self._row_to_entry(dict(row)) if row else None
        except Exception as e:
            logger.error(f"Failed to get configuration metadata for {config_id}: {e}")
            raise DatabaseError(f"Failed to get configuration metadata: {e}")

    def _row_to_entry(self, row: Dict[str, Any]) -> ConfigEntry:
        return ConfigEntry(
            id=row['id'],
            filename=row['filename'],
            stored_name=row['stored_name'],
            uploaded_at=datetime.fromisoformat(row['uploaded_at'])
        )
