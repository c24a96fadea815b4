"""Settings shared by every environment module."""

import os
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]


def env_bool(name: str, default: str = "0") -> bool:
    return bool(int(os.getenv(name, default)))


def env_float(name: str, default: float) -> float:
    return float(os.getenv(name, str(default)))


def env_int_list(name: str, default: str) -> tuple:
    raw = os.getenv(name, default)
    return tuple(int(p) for p in raw.split(",") if p.strip())


DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_dashboard"),
}

# 'mock' serves generated records, 'database' classifies the punch log.
DATA_SOURCE = os.getenv("DATA_SOURCE", "mock")
# 'json' reads EMPLOYEE_JSON_PATH, 'database' the details table.
EMPLOYEE_REGISTRY = os.getenv("EMPLOYEE_REGISTRY", "json")
EMPLOYEE_JSON_PATH = os.getenv("EMPLOYEE_JSON_PATH", str(REPO_ROOT / "data" / "employees.json"))

# Classification thresholds (hours)
PRESENT_HOURS = env_float("PRESENT_HOURS", 8.0)
PARTIAL_DAY_HOURS = env_float("PARTIAL_DAY_HOURS", 6.0)

# Mock data generator (weekday numbers: Monday=0 ... Sunday=6)
WEEKEND_DAYS = env_int_list("WEEKEND_DAYS", "4,5")
ABSENT_RATE = env_float("ABSENT_RATE", 0.05)
LATE_RATE = env_float("LATE_RATE", 0.10)
MOCK_DAYS = int(os.getenv("MOCK_DAYS", "30"))
MOCK_SEED = int(os.environ["MOCK_SEED"]) if os.getenv("MOCK_SEED") else None

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
