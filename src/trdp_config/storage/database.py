from typing import Optional
import aiosqlite
import asyncio
from contextlib import asynccontextmanager

from ..utils.logging import get_logger
from ..utils.exceptions import ConnectionPoolError


logger = get_logger(__name__)


class ConnectionPool:
    """Manages a small pool of aiosqlite connections"""
    def __init__(self, db_path: str, max_connections: int = 3, acquire_timeout: float = 5.0):
        self.db_path = db_path
        self.max_connections = max_connections
        self.acquire_timeout = acquire_timeout
        self._pool: Optional[asyncio.Queue] = None
        self._connections = []

    async def _connect(self) -> aiosqlite.Connection:
        conn = await aiosqlite.connect(self.db_path)
        try:
            conn.row_factory = aiosqlite.Row
            # An open PRAGMA cursor keeps the database locked for the next connection
            async with conn.execute('PRAGMA journal_mode=WAL'):
                pass
        except Exception:
            await conn.close()
            raise
        return conn

    async def initialize(self):
        """Open all pooled connections"""
        logger.info(f"Initializing connection pool with {self.max_connections} connections to {self.db_path}")
        self._pool = asyncio.Queue(maxsize=self.max_connections)
        try:
            for _ in range(self.max_connections):
                conn = await self._connect()
                self._connections.append(conn)
                await self._pool.put(conn)
        except Exception as e:
            logger.error(f"Failed to initialize connection pool: {e}")
            await self.close()
            raise ConnectionPoolError(f"Connection pool initialization failed: {e}")

    @asynccontextmanager
    async def acquire(self):
        """Acquire a connection, returning it to the pool on every exit path"""
        if self._pool is None:
            raise ConnectionPoolError("Connection pool is not initialized")
        try:
            connection = await asyncio.wait_for(self._pool.get(), timeout=self.acquire_timeout)
        except asyncio.TimeoutError:
            raise ConnectionPoolError("Timeout waiting for database connection")

        try:
            yield connection
        finally:
            self._pool.put_nowait(connection)

    async def close(self):
        """Close all connections in the pool"""
        for conn in self._connections:
            try:
                await conn.close()
            except Exception as e:
                logger.error(f"Error closing database connection: {e}")
        self._connections.clear()
        self._pool = None
