"""
Tests for the completion date estimator (completion_estimator.py).

Dates are pinned with the `today` argument. 2026-10-19 is a Monday.
"""

from datetime import date

import pytest

from frameshop.completion_estimator import (
    calculate_estimated_completion,
    skip_weekend,
    total_processing_days,
    workload_delay,
)

MONDAY = date(2026, 10, 19)
WEDNESDAY = date(2026, 10, 21)
FRIDAY = date(2026, 10, 23)
NEXT_MONDAY = date(2026, 10, 26)


# --- Workload delay ---

@pytest.mark.parametrize("workload,expected", [
    (0, 0.0),
    (10, 0.0),
    (15, 0.0),
    (16, 0.5),
    (20, 2.5),
    (100, 42.5),
])
def test_workload_delay(workload, expected):
    assert workload_delay(workload) == expected


# --- Processing days ---

def test_base_days_by_complexity():
    assert total_processing_days(0, "simple", "standard") == 3
    assert total_processing_days(0, "medium", "standard") == 5
    assert total_processing_days(0, "complex", "standard") == 8


def test_priority_shortens_and_rounds_up():
    assert total_processing_days(0, "medium", "rush") == 3      # ceil(2.5)
    assert total_processing_days(0, "simple", "express") == 1   # ceil(0.75)
    assert total_processing_days(0, "complex", "express") == 2


def test_busy_shop_express_complex():
    """(8 + 2.5) × 0.25 = 2.625 → 3 days."""
    assert total_processing_days(20, "complex", "express") == 3


def test_half_day_delay_rounds_up():
    assert total_processing_days(16, "simple", "standard") == 4


def test_unknown_values_use_medium_standard():
    assert total_processing_days(0, "baroque", "standard") == 5
    assert total_processing_days(0, "simple", "yesterday") == 3
    assert total_processing_days(0, None, None) == 5


# --- Weekend handling ---

def test_weekdays_unchanged():
    for offset in range(5):
        day = date(2026, 10, 19 + offset)
        assert skip_weekend(day) == day


def test_saturday_and_sunday_move_to_monday():
    assert skip_weekend(date(2026, 10, 24)) == NEXT_MONDAY
    assert skip_weekend(date(2026, 10, 25)) == NEXT_MONDAY


# --- Full estimate ---

def test_quiet_shop_simple_standard():
    assert calculate_estimated_completion(10, "simple", "standard", today=MONDAY) == date(2026, 10, 22)


def test_landing_on_saturday_moves_forward():
    # Wednesday + 3 = Saturday
    assert calculate_estimated_completion(10, "simple", "standard", today=WEDNESDAY) == NEXT_MONDAY


def test_busy_shop_complex_express():
    assert calculate_estimated_completion(20, "complex", "express", today=MONDAY) == date(2026, 10, 22)


def test_friday_express_lands_monday():
    assert calculate_estimated_completion(0, "simple", "express", today=FRIDAY) == NEXT_MONDAY


def test_never_before_today_plus_processing_days():
    for start_offset in range(7):
        today = date(2026, 10, 18 + start_offset)
        for complexity in ("simple", "medium", "complex"):
            for priority in ("standard", "rush", "express"):
                result = calculate_estimated_completion(18, complexity, priority, today=today)
                days = total_processing_days(18, complexity, priority)
                assert (result - today).days >= days
                assert (result - today).days <= days + 2
                assert result.weekday() < 5


def test_defaults_to_current_date():
    result = calculate_estimated_completion(0, "medium", "standard")
    assert result > date.today()
    assert result.weekday() < 5
