"""Error reporting helpers used at the program boundary and around the intake loop."""
from __future__ import annotations

import functools
import time
from typing import Callable, TypeVar

from loguru import logger

T = TypeVar('T')


def log_execution_time(logger_instance=logger, level: str = "DEBUG"):
    """Decorator to log how long the wrapped function took.

    Args:
        logger_instance: Logger to use
        level: Log level name (DEBUG, INFO, ...)
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            start_time = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                elapsed = time.perf_counter() - start_time
                log_func = getattr(logger_instance, level.lower(), logger_instance.debug)
                log_func(f"{func.__name__} executed in {elapsed:.3f}s")
        return wrapper
    return decorator


class ErrorHandler:
    """Reports a run-aborting error once, in a single human-readable line."""

    def __init__(self, logger_instance=logger):
        self.logger = logger_instance

    def describe(self, error: Exception, context: str = "") -> str:
        """Build the message shown to the operator."""
        return f"{context}: {error}" if context else str(error)

    def handle(self, error: Exception, context: str = "", reraise: bool = False) -> str:
        """Log an error with optional context.

        Args:
            error: The exception to report
            context: Prefix describing where the error happened
            reraise: Whether to re-raise after logging

        Returns:
            The logged message
        """
        message = self.describe(error, context)
        self.logger.error(message)
        if reraise:
            raise error
        return message
