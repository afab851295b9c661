from .transaction import Transaction, TransactionCreate, TransactionResponse

__all__ = [
    "Transaction",
    "TransactionCreate",
    "TransactionResponse",
]
