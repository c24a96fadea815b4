from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import PunchEvent
from .repository import PunchRepository


class MySQLPunchRepository(PunchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_events(self, *, start_date: date, end_date: date) -> Sequence[PunchEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, punch_time
                FROM punches
                WHERE DATE(punch_time) BETWEEN %s AND %s
                ORDER BY employee_id ASC, punch_time ASC
                """,
                (start_date, end_date),
            )
            rows = fetchall(cur)
            return [PunchEvent(employee_id=str(r["employee_id"]), punch_time=r["punch_time"]) for r in rows]

    def add_events(self, events: Sequence[PunchEvent]) -> int:
        if not events:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                "INSERT INTO punches(employee_id, punch_time) VALUES(%s,%s)",
                [(e.employee_id, e.punch_time) for e in events],
            )
            return int(cur.rowcount)
