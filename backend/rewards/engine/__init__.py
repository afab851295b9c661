from .models import PurchaseRecord, RewardResult
from .points import calculate_monthly_points, month_key, points_for_amount, summarize_rewards

__all__ = [
    "PurchaseRecord",
    "RewardResult",
    "calculate_monthly_points",
    "month_key",
    "points_for_amount",
    "summarize_rewards",
]
