import functools
import time
from typing import Callable, ParamSpec, TypeVar

import structlog

logger = structlog.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


def log_timing(func: Callable[P, T]) -> Callable[P, T]:
    """Decorator that logs execution time of a function to debug logger."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_time = time.perf_counter() - start_time
            logger.debug(f"{func.__qualname__} took {elapsed_time:.4f} seconds")

    return wrapper
