from fastapi import Depends
from sqlalchemy.orm import Session

from rewards.dependencies.db import get_db
from rewards.services.reward_service import RewardService
from rewards.services.transaction_service import TransactionService
from rewards.services.transaction_store import SqlAlchemyTransactionStore, TransactionStore


def get_transaction_store(db: Session = Depends(get_db)) -> TransactionStore:
    return SqlAlchemyTransactionStore(db)

def get_reward_service(store: TransactionStore = Depends(get_transaction_store)) -> RewardService:
    # Creates and returns a RewardService bound to the request-scoped store.
    return RewardService(store)

def get_transaction_service(store: TransactionStore = Depends(get_transaction_store)) -> TransactionService:
    return TransactionService(store)
