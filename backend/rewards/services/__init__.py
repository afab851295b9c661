from .errors import ServiceError
from .fallback import fallback_on_error
from .reward_service import RewardService
from .sample_data import init_sample_data
from .transaction_service import TransactionService
from .transaction_store import SqlAlchemyTransactionStore, TransactionStore

__all__ = [
    "ServiceError",
    "fallback_on_error",
    "RewardService",
    "init_sample_data",
    "TransactionService",
    "SqlAlchemyTransactionStore",
    "TransactionStore",
]
