from datetime import date
from types import SimpleNamespace

from attendance_dashboard.container import build_generator
from attendance_dashboard.employees.model import Employee

ROSTER = [Employee(str(i), f"First{i}", f"Last{i}", "Ops") for i in range(1, 6)]


def test_unseeded_generator_repeats_its_output():
    generator = build_generator(SimpleNamespace(MOCK_SEED=None))

    first = generator.generate(ROSTER, end_date=date(2025, 3, 1))
    second = generator.generate(ROSTER, end_date=date(2025, 3, 1))

    assert first == second


def test_configured_seed_is_used():
    a = build_generator(SimpleNamespace(MOCK_SEED=7)).generate(ROSTER, end_date=date(2025, 3, 1))
    b = build_generator(SimpleNamespace(MOCK_SEED=7)).generate(ROSTER, end_date=date(2025, 3, 1))

    assert a == b
