"""Fill the punch log with generated attendance for the current roster.

Usage: APP_ENV=development DATA_SOURCE=database python scripts/seed_db.py [seed]
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "attendance_dashboard"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from attendance_dashboard.attendance.ingest import record_to_events
from attendance_dashboard.attendance.mysql_punch_repository import MySQLPunchRepository
from attendance_dashboard.container import build_container, build_generator
from attendance_dashboard.main import load_settings


def main(argv: list[str]) -> None:
    overrides = {"MOCK_SEED": int(argv[1])} if len(argv) > 1 else {}
    settings = load_settings(get_settings_module(), overrides)
    container = build_container(settings)
    if container.conn is None:
        raise SystemExit("DATA_SOURCE or EMPLOYEE_REGISTRY must be 'database' to seed the punch log")

    roster = container.employee_service.list_employees()
    records = build_generator(settings).generate(roster)
    events = [ev for r in records for ev in record_to_events(r)]

    inserted = MySQLPunchRepository(container.conn).add_events(events)
    print(f"OK: Seeded {inserted} punches for {len(roster)} employees ({len(records)} employee-days)")


if __name__ == "__main__":
    main(sys.argv)
