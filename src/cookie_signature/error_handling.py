"""
Error Handling for cookie_signature
===================================

Exception hierarchy and logging helpers shared by the signing modules.

Only caller misuse is an error here. A tampered or malformed token is an
expected outcome and is reported by ``unsign`` returning ``False``.
"""

import functools
import logging
import time
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)


class SignatureError(Exception):
    """Base exception for all signing errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        self.context = context or {}
        super().__init__(message)

        # Context must never carry secret material
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        logger.error(
            f"Signature error: {message}" + (f" ({context_str})" if context_str else "")
        )


class InvalidArgument(SignatureError, TypeError):
    """Raised when sign/unsign are called with arguments of the wrong shape."""

    pass


class SignatureConfigurationError(SignatureError, ValueError):
    """Raised when signing configuration is invalid."""

    pass


def log_signing_performance(func: Callable) -> Callable:
    """Decorator to log timing for signing operations."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()

        try:
            result = func(*args, **kwargs)
            duration = time.perf_counter() - start_time
            logger.debug(f"Signing operation {func.__name__} completed in {duration:.6f}s")
            return result

        except Exception as e:
            duration = time.perf_counter() - start_time
            logger.warning(
                f"Signing operation {func.__name__} failed after {duration:.6f}s: {e}"
            )
            raise

    return wrapper


def log_config_validation(section: str):
    """Log whether a signing config section passed its checks, then re-raise failures."""

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(config, *args, **kwargs):
            try:
                func(config, *args, **kwargs)
            except SignatureConfigurationError as e:
                logger.error(f"Signing config section {section} rejected: {e}")
                raise
            logger.debug(f"Signing config section {section} accepted")

        return wrapper

    return decorator
