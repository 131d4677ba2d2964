"""Constant-time comparison."""

import hmac


def timing_safe_equal(a: bytes, b: bytes) -> bool:
    """
    Compare two equal-length byte strings in time that depends only on length.

    Raises:
        ValueError: If the inputs differ in length
    """
    if len(a) != len(b):
        raise ValueError("timing_safe_equal requires inputs of equal length")
    return hmac.compare_digest(a, b)
