from __future__ import annotations

import logging
from typing import Any, Dict, List, Protocol

import psycopg
from psycopg import errors as pg_errors
from psycopg_pool import AsyncConnectionPool

from ..results import Failure, FailureKind, Found, NotFound, StoreResult
from ..schemas import Vehicle, VehicleUpdate

VEHICLE_COLUMNS = (
    "vin, manufacturer_name, description, horse_power, model_name,"
    " model_year, purchase_price, fuel_type"
)

logger = logging.getLogger(__name__)


class VehicleStore(Protocol):
    async def insert(self, vehicle: Vehicle) -> StoreResult[Dict[str, Any]]: ...

    async def select_all(self) -> StoreResult[List[Dict[str, Any]]]: ...

    async def select_by_vin(self, vin: str) -> StoreResult[Dict[str, Any]]: ...

    async def update_by_vin(self, vin: str, fields: VehicleUpdate) -> StoreResult[Dict[str, Any]]: ...

    async def delete_by_vin(self, vin: str) -> StoreResult[int]: ...


def _classify(exc: psycopg.Error) -> Failure:
    if isinstance(exc, pg_errors.UniqueViolation):
        kind = FailureKind.CONFLICT
    elif isinstance(exc, psycopg.OperationalError):
        # PoolTimeout derives from OperationalError
        kind = FailureKind.UNAVAILABLE
    else:
        kind = FailureKind.ERROR
    return Failure(kind=kind, detail=str(exc))


class PostgresVehicleStore:
    """Vehicle table access over an explicitly owned connection pool.

    Driver exceptions never leave this class; they come back as ``Failure``.
    """

    def __init__(self, pool: AsyncConnectionPool):
        self.pool = pool

    async def _fetch(self, operation: str, query: str, params: Any, *, many: bool = False) -> StoreResult:
        try:
            async with self.pool.connection() as conn, conn.cursor() as cur:
                await cur.execute(query, params)
                if many:
                    return Found(await cur.fetchall())
                row = await cur.fetchone()
        except psycopg.Error as exc:
            failure = _classify(exc)
            logger.warning("vehicle %s failed (%s): %s", operation, failure.kind.value, failure.detail)
            return failure
        return Found(row) if row else NotFound()

    async def insert(self, vehicle: Vehicle) -> StoreResult[Dict[str, Any]]:
        return await self._fetch(
            "insert",
            f"""
            INSERT INTO vehicle ({VEHICLE_COLUMNS})
            VALUES (
                %(vin)s, %(manufacturer_name)s, %(description)s, %(horse_power)s::integer,
                %(model_name)s, %(model_year)s::integer, %(purchase_price)s::decimal, %(fuel_type)s
            ) RETURNING {VEHICLE_COLUMNS};
            """,
            vehicle.model_dump(),
        )

    async def select_all(self) -> StoreResult[List[Dict[str, Any]]]:
        return await self._fetch(
            "select_all",
            f"SELECT {VEHICLE_COLUMNS} FROM vehicle ORDER BY created_at, vin;",
            None,
            many=True,
        )

    async def select_by_vin(self, vin: str) -> StoreResult[Dict[str, Any]]:
        return await self._fetch(
            "select_by_vin",
            f"SELECT {VEHICLE_COLUMNS} FROM vehicle WHERE vin=%s;",
            (vin,),
        )

    async def update_by_vin(self, vin: str, fields: VehicleUpdate) -> StoreResult[Dict[str, Any]]:
        params = fields.mutable_fields()
        params["vin"] = vin
        return await self._fetch(
            "update_by_vin",
            f"""
            UPDATE vehicle SET
                manufacturer_name=%(manufacturer_name)s,
                description=%(description)s,
                horse_power=%(horse_power)s::integer,
                model_name=%(model_name)s,
                model_year=%(model_year)s::integer,
                purchase_price=%(purchase_price)s::decimal,
                fuel_type=%(fuel_type)s
            WHERE vin=%(vin)s
            RETURNING {VEHICLE_COLUMNS};
            """,
            params,
        )

    async def delete_by_vin(self, vin: str) -> StoreResult[int]:
        try:
            async with self.pool.connection() as conn, conn.cursor() as cur:
                await cur.execute("DELETE FROM vehicle WHERE vin=%s;", (vin,))
                deleted = cur.rowcount
        except psycopg.Error as exc:
            failure = _classify(exc)
            logger.warning("vehicle delete_by_vin failed (%s): %s", failure.kind.value, failure.detail)
            return failure
        return Found(deleted) if deleted > 0 else NotFound()
