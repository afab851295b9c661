from typing import Any, Dict, List

from rewards.models.transaction import Transaction, TransactionCreate
from rewards.services.errors import ServiceError
from rewards.services.transaction_store import TransactionStore


class TransactionService:
    def __init__(self, store: TransactionStore) -> None:
        self.store = store

    def create_transaction(self, payload: TransactionCreate) -> Dict[str, Any]:
        record = Transaction(
            customer_id=payload.customer_id,
            amount=payload.amount,
            transaction_date=payload.transaction_date,
        )
        saved = self.store.save(record)
        return saved.to_dict()

    def list_transactions(self) -> List[Dict[str, Any]]:
        return [row.to_dict() for row in self.store.find_all()]

    def list_customer_transactions(self, customer_id: int) -> List[Dict[str, Any]]:
        """Transactions for one customer; an unknown customer simply has none."""
        rows = self.store.find_transactions_by_customer_id(customer_id)
        return [row.to_dict() for row in rows]

    def get_transaction(self, transaction_id: int) -> Dict[str, Any]:
        row = self.store.find_by_id(transaction_id)
        if not row:
            raise ServiceError(
                404,
                "NOT_FOUND",
                f"Transaction '{transaction_id}' not found.",
                {"transaction_id": transaction_id},
            )
        return row.to_dict()
