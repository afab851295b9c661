from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Path

from rewards.dependencies.services import get_transaction_service
from rewards.models.transaction import MAX_ID, MIN_ID, TransactionResponse
from rewards.services.transaction_service import TransactionService

router = APIRouter(
    prefix="/api/customers",
    tags=["customers"]
)


@router.get("/{customer_id}/transactions", response_model=List[TransactionResponse])
def get_customer_transactions(
    customer_id: int = Path(..., ge=MIN_ID, le=MAX_ID),
    service: TransactionService = Depends(get_transaction_service),
) -> List[Dict[str, Any]]:
    """
    Get all transactions for a specific customer, oldest first.

    An unknown customer returns an empty list rather than 404.
    """
    return service.list_customer_transactions(customer_id)
