import logging
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Protocol

from sqlalchemy.orm import Session

from rewards.models.transaction import MAX_ID, MIN_ID, Transaction
from rewards.services.errors import ServiceError

logger = logging.getLogger(__name__)


class TransactionStore(Protocol):
    """Persistence boundary for purchase transactions."""

    def find_transactions_by_customer_id(self, customer_id: int) -> List[Transaction]:
        ...

    def save(self, transaction: Transaction) -> Transaction:
        ...

    def find_all(self) -> List[Transaction]:
        ...

    def find_by_id(self, transaction_id: int) -> Optional[Transaction]:
        ...


def _parse_amount(amount) -> Optional[Decimal]:
    if amount is None:
        return None
    try:
        return Decimal(str(amount))
    except (InvalidOperation, ValueError):
        return None


def validate_transaction(transaction: Transaction) -> None:
    """Reject records that must never reach the reward engine."""
    customer_id = transaction.customer_id
    if customer_id is None:
        raise ServiceError(
            400,
            "VALIDATION_ERROR",
            "customerId is required.",
            {"field": "customerId"},
        )
    if not MIN_ID <= customer_id <= MAX_ID:
        raise ServiceError(
            400,
            "VALIDATION_ERROR",
            f"customerId must be between {MIN_ID} and {MAX_ID}.",
            {"field": "customerId", "value": str(customer_id)},
        )

    amount = _parse_amount(transaction.amount)
    if amount is None or not amount.is_finite():
        raise ServiceError(
            400,
            "VALIDATION_ERROR",
            "amount must be a finite number.",
            {"field": "amount", "value": str(transaction.amount)},
        )
    if amount < 0:
        raise ServiceError(
            400,
            "VALIDATION_ERROR",
            "amount must be greater than or equal to 0.",
            {"field": "amount", "value": str(transaction.amount)},
        )
    if transaction.transaction_date is None:
        raise ServiceError(
            400,
            "VALIDATION_ERROR",
            "date is required.",
            {"field": "date"},
        )


class SqlAlchemyTransactionStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def find_transactions_by_customer_id(self, customer_id: int) -> List[Transaction]:
        return (
            self.db.query(Transaction)
            .filter(Transaction.customer_id == customer_id)
            .order_by(Transaction.transaction_date.asc(), Transaction.id.asc())
            .all()
        )

    def find_all(self) -> List[Transaction]:
        return (
            self.db.query(Transaction)
            .order_by(Transaction.transaction_date.asc(), Transaction.id.asc())
            .all()
        )

    def find_by_id(self, transaction_id: int) -> Optional[Transaction]:
        return self.db.query(Transaction).filter(Transaction.id == transaction_id).first()

    def save(self, transaction: Transaction) -> Transaction:
        validate_transaction(transaction)
        try:
            self.db.add(transaction)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(transaction)
        logger.info(
            "Saved transaction id=%s for customer_id=%s amount=%s",
            transaction.id,
            transaction.customer_id,
            transaction.amount,
        )
        return transaction
