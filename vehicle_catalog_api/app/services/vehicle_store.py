"""
SQLite store for vehicle rows.

``VehicleStore`` is the only code that issues SQL against the
``vehicles`` table.  Each method opens its own connection, runs a
single parameterised statement, commits if needed and closes the
connection.  Listings are ordered by primary key.

Any ``sqlite3.Error``, and the ``OverflowError`` sqlite3 raises for an
integer outside the 64-bit column range, is re-raised as
``StoreAccessError``; the service decides what a failed access means
for the request at hand.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator, List, Optional

from vehicle_catalog_api.app.core.db import get_connection
from vehicle_catalog_api.app.schemas.vehicle import Vehicle

logger = logging.getLogger(__name__)

_SELECT = "SELECT id, year, make, model FROM vehicles"


class StoreAccessError(Exception):
    """Generic failure reported by the store."""


class VehicleStore:
    """Persistence for ``Vehicle`` values keyed by ``id``."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        try:
            conn = get_connection(self.db_path)
        except sqlite3.Error as exc:
            raise StoreAccessError(str(exc)) from exc
        try:
            yield conn
            conn.commit()
        except (sqlite3.Error, OverflowError) as exc:
            conn.rollback()
            logger.warning("Vehicle store access failed: %s", exc)
            raise StoreAccessError(str(exc)) from exc
        finally:
            conn.close()

    def _select(self, where: str = "", params: tuple = ()) -> List[Vehicle]:
        query = f"{_SELECT} {where} ORDER BY id ASC"
        with self._connection() as conn:
            rows = conn.execute(query, params).fetchall()
        return [self._row_to_vehicle(row) for row in rows]

    def _execute(self, sql: str, params: tuple) -> int:
        with self._connection() as conn:
            cursor = conn.execute(sql, params)
            return cursor.rowcount

    def list_all(self) -> List[Vehicle]:
        return self._select()

    def find_by_id(self, vehicle_id: int) -> Optional[Vehicle]:
        rows = self._select("WHERE id = ?", (vehicle_id,))
        return rows[0] if rows else None

    def find_by_year(self, year: int) -> List[Vehicle]:
        return self._select("WHERE year = ?", (year,))

    def find_by_make(self, make: str) -> List[Vehicle]:
        return self._select("WHERE make = ?", (make,))

    def find_by_model(self, model: str) -> List[Vehicle]:
        return self._select("WHERE model = ?", (model,))

    def id_exists(self, vehicle_id: int) -> bool:
        with self._connection() as conn:
            row = conn.execute(
                "SELECT EXISTS (SELECT 1 FROM vehicles WHERE id = ?)",
                (vehicle_id,),
            ).fetchone()
        return bool(row[0])

    def insert(self, vehicle: Vehicle) -> int:
        """Insert a new row.

        Raises ``StoreAccessError`` if the id is already taken or a
        column constraint is violated.
        """
        return self._execute(
            "INSERT INTO vehicles (id, year, make, model) VALUES (?, ?, ?, ?)",
            (vehicle.id, vehicle.year, vehicle.make, vehicle.model),
        )

    def update_year(self, vehicle_id: int, year: int) -> int:
        return self._execute("UPDATE vehicles SET year = ? WHERE id = ?", (year, vehicle_id))

    def update_make(self, vehicle_id: int, make: str) -> int:
        return self._execute("UPDATE vehicles SET make = ? WHERE id = ?", (make, vehicle_id))

    def update_model(self, vehicle_id: int, model: str) -> int:
        return self._execute("UPDATE vehicles SET model = ? WHERE id = ?", (model, vehicle_id))

    def delete(self, vehicle_id: int) -> int:
        return self._execute("DELETE FROM vehicles WHERE id = ?", (vehicle_id,))

    @staticmethod
    def _row_to_vehicle(row: sqlite3.Row) -> Vehicle:
        return Vehicle(id=row["id"], year=row["year"], make=row["make"], model=row["model"])
