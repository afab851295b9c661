"""
Reward Service - loads a customer's purchases and scores them.

The store is passed in explicitly, so any object satisfying
`TransactionStore` (the SQLAlchemy store, or an in-memory fake in tests)
can back it. Results are recomputed on every call; nothing is cached.
"""

import logging
from typing import List, Optional

from rewards.engine import PurchaseRecord, RewardResult, summarize_rewards
from rewards.models.transaction import Transaction
from rewards.services.fallback import fallback_on_error
from rewards.services.transaction_store import TransactionStore

logger = logging.getLogger(__name__)


def _zero_result(service: "RewardService", customer_id: Optional[int] = None) -> RewardResult:
    return RewardResult.empty(customer_id)


class RewardService:
    def __init__(self, store: TransactionStore) -> None:
        self.store = store

    def _to_records(self, transactions: List[Transaction]) -> List[PurchaseRecord]:
        return [
            PurchaseRecord(amount=txn.amount, date=txn.transaction_date)
            for txn in transactions
        ]

    @fallback_on_error(_zero_result)
    def calculate_rewards(self, customer_id: Optional[int] = None) -> RewardResult:
        """
        Monthly and total reward points for a customer.

        Never raises: an absent customer id, a customer with no purchases
        and any failure while loading or scoring all produce a zero result.
        """
        if customer_id is None:
            logger.debug("No customer id supplied, returning zero rewards")
            return RewardResult.empty(None)

        # Copy so the engine never sees later mutations of a shared list
        transactions = list(self.store.find_transactions_by_customer_id(customer_id))
        result = summarize_rewards(customer_id, self._to_records(transactions))
        logger.debug(
            "Scored %d transactions for customer_id=%s: total_points=%s",
            len(transactions),
            customer_id,
            result.total_points,
        )
        return result
