from typing import Optional

from psycopg import AsyncConnection
from psycopg.rows import dict_row
from psycopg.types.numeric import FloatLoader
from psycopg_pool import AsyncConnectionPool

from . import config


async def _configure(conn: AsyncConnection) -> None:
    # NUMERIC columns come back as float so JSON payloads round-trip unchanged
    conn.adapters.register_loader("numeric", FloatLoader)


def create_pool(conninfo: Optional[str] = None) -> AsyncConnectionPool:
    """Build the connection pool without opening it; the app lifespan opens it."""
    return AsyncConnectionPool(
        conninfo or config.database_url(),
        min_size=config.DB_POOL_MIN_SIZE,
        max_size=config.DB_POOL_MAX_SIZE,
        timeout=config.DB_POOL_TIMEOUT,
        kwargs={
            "row_factory": dict_row,
            "connect_timeout": 3,
            "keepalives": 1,
            "keepalives_idle": 30,
            "keepalives_interval": 10,
            "keepalives_count": 3,
        },
        configure=_configure,
        open=False,
    )
