"""
Completion date estimator.

Base days by complexity, plus a queueing delay once the shop has more than
WORKLOAD_THRESHOLD orders in active production, scaled down for paid
priority and pushed past weekends.

Rule-based and total: unknown complexity is treated as medium and unknown
priority as standard.
"""

import logging
import math
from datetime import date, timedelta
from typing import Optional

logger = logging.getLogger(__name__)

BASE_PROCESSING_DAYS = {
    "simple": 3,
    "medium": 5,
    "complex": 8,
}

PRIORITY_MULTIPLIERS = {
    "standard": 1.0,
    "rush": 0.5,
    "express": 0.25,
}

WORKLOAD_THRESHOLD = 15          # active orders before the queue slows down
WORKLOAD_DELAY_PER_ORDER = 0.5   # days per active order above the threshold

SATURDAY = 5
SUNDAY = 6


def workload_delay(current_workload: int) -> float:
    """Extra days of queueing for the current active order count. No upper cap."""
    return max(0.0, (current_workload - WORKLOAD_THRESHOLD) * WORKLOAD_DELAY_PER_ORDER)


def skip_weekend(day: date) -> date:
    """Move forward to the next weekday. Weekdays are returned unchanged."""
    while day.weekday() in (SATURDAY, SUNDAY):
        day += timedelta(days=1)
    return day


def total_processing_days(current_workload: int, complexity: str, priority: str) -> int:
    if complexity in BASE_PROCESSING_DAYS:
        base_days = BASE_PROCESSING_DAYS[complexity]
    else:
        logger.debug("Unknown complexity %r, estimating as medium", complexity)
        base_days = BASE_PROCESSING_DAYS["medium"]

    if priority in PRIORITY_MULTIPLIERS:
        multiplier = PRIORITY_MULTIPLIERS[priority]
    else:
        logger.debug("Unknown priority %r, estimating as standard", priority)
        multiplier = PRIORITY_MULTIPLIERS["standard"]

    return math.ceil((base_days + workload_delay(current_workload)) * multiplier)


def calculate_estimated_completion(current_workload: int, complexity: str, priority: str,
                                   today: Optional[date] = None) -> date:
    """
    Estimate the completion date of a new order.

    Args:
        current_workload: orders currently approved, in production or in quality check
        complexity: "simple" | "medium" | "complex"
        priority: "standard" | "rush" | "express"
        today: start date; defaults to the current date

    Returns:
        today + ceil((base days + workload delay) × priority multiplier),
        moved forward to Monday if it lands on a weekend.
    """
    if today is None:
        today = date.today()
    days = total_processing_days(current_workload, complexity, priority)
    return skip_weekend(today + timedelta(days=days))
