from .customers import router as customers_router
from .rewards import router as rewards_router
from .transactions import router as transactions_router

__all__ = [
    "customers_router",
    "rewards_router",
    "transactions_router",
]
