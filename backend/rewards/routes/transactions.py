from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from rewards.dependencies.services import get_transaction_service
from rewards.models.transaction import MAX_ID, MIN_ID, TransactionCreate, TransactionResponse
from rewards.services.errors import ServiceError
from rewards.services.transaction_service import TransactionService

router = APIRouter(
    prefix="/api/transactions",
    tags=["transactions"]
)


def _http_error(exc: ServiceError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.to_payload())


@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
def create_transaction(
    request: TransactionCreate,
    service: TransactionService = Depends(get_transaction_service),
) -> Dict[str, Any]:
    """
    Record a new purchase.

    Request body:
    {
        "customerId": 10,
        "amount": 120.50,
        "date": "2024-03-01"
    }
    """
    try:
        return service.create_transaction(request)
    except ServiceError as exc:
        raise _http_error(exc)


@router.get("", response_model=List[TransactionResponse])
def list_transactions(
    service: TransactionService = Depends(get_transaction_service),
) -> List[Dict[str, Any]]:
    """
    List all transactions, oldest first.
    """
    return service.list_transactions()


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: int = Path(..., ge=MIN_ID, le=MAX_ID),
    service: TransactionService = Depends(get_transaction_service),
) -> Dict[str, Any]:
    try:
        return service.get_transaction(transaction_id)
    except ServiceError as exc:
        raise _http_error(exc)
