import functools
import logging
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def fallback_on_error(fallback: Callable[..., T]) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Convert any exception raised by the decorated callable into a default value.

    `fallback` receives the same arguments as the decorated callable and
    returns the substitute value. Only the decorated callable is affected.

    Usage:
        @fallback_on_error(lambda self, customer_id: RewardResult.empty(customer_id))
        def calculate_rewards(self, customer_id): ...
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return func(*args, **kwargs)
            except Exception:
                logger.exception("%s failed, using fallback value", func.__qualname__)
                return fallback(*args, **kwargs)
        return wrapper
    return decorator
