"""
Data models for the reward calculation engine.
All models are dataclasses so the engine stays free of ORM and HTTP types.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, Optional


@dataclass(frozen=True)
class PurchaseRecord:
    """
    A single purchase as seen by the engine.

    Fields:
    - amount: purchase amount in currency units (expected >= 0)
    - date: calendar date of the purchase
    """
    amount: Optional[Decimal]
    date: Optional[date]


@dataclass
class RewardResult:
    """
    Reward points for one customer.

    Fields:
    - customer_id: the customer the points belong to (None for an absent id)
    - monthly_points: "YYYY-MM" -> points, only months with purchases
    - total_points: sum of every monthly value
    """
    customer_id: Optional[int]
    monthly_points: Dict[str, int] = field(default_factory=dict)
    total_points: int = 0

    @classmethod
    def empty(cls, customer_id: Optional[int]) -> "RewardResult":
        """Zero-valued result used for no activity and for fallbacks."""
        return cls(customer_id=customer_id, monthly_points={}, total_points=0)
