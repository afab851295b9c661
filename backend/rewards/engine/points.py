"""
Tiered reward point calculation.
Deterministic and unit-testable: no I/O, no shared state.

Bands per purchase amount:
- up to 50: no points
- 50 to 100: 1 point per unit
- above 100: 2 points per unit
"""

import logging
import math
from collections import defaultdict
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Dict, Iterable, Optional, Union

from rewards.engine.models import PurchaseRecord, RewardResult

logger = logging.getLogger(__name__)

LOWER_THRESHOLD = Decimal("50")
UPPER_THRESHOLD = Decimal("100")
UPPER_BAND_MULTIPLIER = 2

Amount = Union[Decimal, int, float, str, None]


def _to_decimal(amount: Amount) -> Decimal:
    if amount is None:
        return Decimal("0")
    if isinstance(amount, Decimal):
        return amount
    try:
        # str() keeps floats such as 120.1 from picking up binary noise
        return Decimal(str(amount))
    except (InvalidOperation, ValueError):
        logger.warning("Unparseable purchase amount %r; scoring as 0 points", amount)
        return Decimal("0")


def points_for_amount(amount: Amount) -> int:
    """
    Points earned by a single purchase.

    The formula is evaluated exactly and floored once per purchase, so a
    purchase of 120.75 earns floor(91.5) = 91 points.

    Example:
        >>> points_for_amount(120)
        90
        >>> points_for_amount(80)
        30
    """
    value = _to_decimal(amount)
    if not value.is_finite():
        logger.warning("Non-finite purchase amount %r; scoring as 0 points", amount)
        return 0

    upper_band = max(value - UPPER_THRESHOLD, Decimal("0"))
    middle_band = max(min(value, UPPER_THRESHOLD) - LOWER_THRESHOLD, Decimal("0"))
    return math.floor(UPPER_BAND_MULTIPLIER * upper_band + middle_band)


def month_key(day: date) -> str:
    """
    Month label for a purchase date.

    Example:
        >>> month_key(date(2024, 1, 15))
        '2024-01'
    """
    return f"{day.year:04d}-{day.month:02d}"


def calculate_monthly_points(records: Iterable[PurchaseRecord]) -> Dict[str, int]:
    """
    Sum per-purchase points by calendar month.

    Months without purchases never appear. Records without a date cannot be
    placed in a month and are skipped. The returned mapping is ordered by month.
    """
    monthly: Dict[str, int] = defaultdict(int)
    for record in records:
        if record.date is None:
            logger.warning("Skipping purchase without a date (amount=%s)", record.amount)
            continue
        monthly[month_key(record.date)] += points_for_amount(record.amount)
    return {key: monthly[key] for key in sorted(monthly)}


def summarize_rewards(customer_id: Optional[int], records: Iterable[PurchaseRecord]) -> RewardResult:
    """Build the monthly breakdown and total for one customer."""
    monthly_points = calculate_monthly_points(records)
    return RewardResult(
        customer_id=customer_id,
        monthly_points=monthly_points,
        total_points=sum(monthly_points.values()),
    )
