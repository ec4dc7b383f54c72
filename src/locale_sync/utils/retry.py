"""
Retry helper for translation calls
"""

import asyncio
import functools
import logging
from typing import Awaitable, Callable, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


def retry_async(
    max_attempts: int = 1,
    delay: float = 1.0,
    backoff_factor: float = 2.0,
    exceptions: Tuple[Type[BaseException], ...] = (Exception,)
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """
    Decorator for retrying async callables

    With the default of a single attempt the wrapped call fails exactly once
    and the exception propagates unchanged.

    Args:
        max_attempts: Total number of attempts, at least 1
        delay: Initial delay between attempts in seconds
        backoff_factor: Multiplier applied to the delay after each failure
        exceptions: Exception types that trigger another attempt
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            current_delay = delay
            for attempt in range(1, max_attempts + 1):
                try:
                    result = await func(*args, **kwargs)
                    if attempt > 1:
                        logger.info(f"{func.__name__} succeeded on attempt {attempt}")
                    return result
                except exceptions as e:
                    if attempt == max_attempts:
                        if max_attempts > 1:
                            logger.error(f"{func.__name__} failed after {max_attempts} attempts: {e}")
                        raise
                    logger.warning(
                        f"{func.__name__} failed on attempt {attempt}: {e}. Retrying in {current_delay}s..."
                    )
                    await asyncio.sleep(current_delay)
                    current_delay *= backoff_factor

        return wrapper
    return decorator
