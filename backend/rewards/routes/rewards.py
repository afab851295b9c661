from fastapi import APIRouter, Depends

from rewards.dependencies.services import get_reward_service
from rewards.schemas.reward_schemas import RewardResponse
from rewards.services.reward_service import RewardService

router = APIRouter(
    prefix="/api/rewards",
    tags=["rewards"]
)


@router.get("/{customer_id}", response_model=RewardResponse)
def get_rewards(
    customer_id: int,
    service: RewardService = Depends(get_reward_service),
) -> RewardResponse:
    """
    Reward points for a customer, per month and in total.

    Always 200: a customer without purchases, or a failure while loading
    them, yields {"monthlyPoints": {}, "totalPoints": 0}.
    """
    return RewardResponse.from_result(service.calculate_rewards(customer_id))
