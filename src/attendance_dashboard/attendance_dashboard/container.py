from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Optional

from .attendance.classifier import AttendanceClassifier
from .attendance.mock_generator import MockAttendanceGenerator, MockGeneratorConfig
from .attendance.mysql_punch_repository import MySQLPunchRepository
from .attendance.service import AttendanceService, MockRecordSource, PunchLogRecordSource, RecordSource
from .attendance.strategies.base import ClassificationPolicy
from .core import constants
from .database.connection import DBConfig, DatabaseConnection
from .employees.json_employee_repository import JsonEmployeeRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .reports.service import StatsReportService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    record_source: RecordSource
    classifier: AttendanceClassifier

    employee_service: EmployeeService
    attendance_service: AttendanceService
    stats_service: StatsReportService


def _connection(settings: Any) -> DatabaseConnection:
    db_config = getattr(settings, "DB_CONFIG")
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    return DatabaseConnection.get_instance(config)


def build_generator(settings: Any) -> MockAttendanceGenerator:
    config = MockGeneratorConfig(
        days=int(getattr(settings, "MOCK_DAYS", constants.DEFAULT_MOCK_DAYS)),
        weekend_days=tuple(getattr(settings, "WEEKEND_DAYS", constants.DEFAULT_WEEKEND_DAYS)),
        absent_rate=float(getattr(settings, "ABSENT_RATE", constants.DEFAULT_ABSENT_RATE)),
        late_rate=float(getattr(settings, "LATE_RATE", constants.DEFAULT_LATE_RATE)),
    )
    seed = getattr(settings, "MOCK_SEED", None)
    if seed is None:
        # One seed per app: every request sees the same records.
        seed = random.SystemRandom().randrange(2**32)
        logger.info("MOCK_SEED not set, generating mock attendance with seed %d", seed)
    return MockAttendanceGenerator(config, seed=seed)


def build_container(settings: Any) -> Container:
    data_source = str(getattr(settings, "DATA_SOURCE", "mock")).lower()
    registry = str(getattr(settings, "EMPLOYEE_REGISTRY", "json")).lower()

    conn = _connection(settings) if "database" in (data_source, registry) else None

    if registry == "database":
        employees_repo: EmployeeRepository = MySQLEmployeeRepository(conn)
    else:
        employees_repo = JsonEmployeeRepository(getattr(settings, "EMPLOYEE_JSON_PATH"))

    classifier = AttendanceClassifier(
        ClassificationPolicy(
            present_hours=float(getattr(settings, "PRESENT_HOURS", constants.DEFAULT_PRESENT_HOURS)),
            partial_day_hours=float(getattr(settings, "PARTIAL_DAY_HOURS", constants.DEFAULT_PARTIAL_DAY_HOURS)),
        )
    )

    if data_source == "database":
        record_source: RecordSource = PunchLogRecordSource(MySQLPunchRepository(conn), classifier)
    else:
        record_source = MockRecordSource(build_generator(settings))

    employee_service = EmployeeService(employees_repo)
    attendance_service = AttendanceService(record_source, employee_service)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        record_source=record_source,
        classifier=classifier,
        employee_service=employee_service,
        attendance_service=attendance_service,
        stats_service=StatsReportService(),
    )
