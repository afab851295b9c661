"""
Reward DTOs - the wire shape of a customer's reward points.

Field names are snake_case in Python and camelCase on the wire, so
`RewardResponse.model_dump(by_alias=True)` produces:

    {"customerId": 1, "monthlyPoints": {"2024-01": 90}, "totalPoints": 90}
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from rewards.engine.models import RewardResult


class RewardResponse(BaseModel):
    """Reward points for one customer, broken down by calendar month."""
    model_config = ConfigDict(populate_by_name=True)

    customer_id: Optional[int] = Field(None, alias="customerId", description="Customer the points belong to")
    monthly_points: Dict[str, int] = Field(
        default_factory=dict,
        alias="monthlyPoints",
        description="YYYY-MM -> points; months without purchases are omitted",
    )
    total_points: int = Field(0, alias="totalPoints", ge=0, description="Sum of all monthly points")

    @classmethod
    def from_result(cls, result: RewardResult) -> "RewardResponse":
        return cls(
            customer_id=result.customer_id,
            monthly_points=dict(result.monthly_points),
            total_points=result.total_points,
        )
