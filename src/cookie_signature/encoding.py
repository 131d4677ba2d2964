"""
Token encoding helpers.

Wire format: ``<value>.<signature>`` where ``signature`` is the standard
base64 encoding of the HMAC-SHA256 digest with trailing ``=`` removed.
"""

import base64
from typing import Optional, Tuple

SEPARATOR = "."


def encode_text(text: str) -> bytes:
    """UTF-8 bytes for any Python string, lone surrogates included."""
    return text.encode("utf-8", "surrogatepass")


def encode_signature(digest: bytes) -> str:
    """Standard base64 without trailing padding."""
    return base64.b64encode(digest).decode("ascii").rstrip("=")


def join_token(value: str, signature: str) -> str:
    return value + SEPARATOR + signature


def split_token(token: str) -> Optional[Tuple[str, str]]:
    """
    Split a signed token on its last separator.

    Returns:
        ``(value, signature)``, or None when the token has no separator
    """
    index = token.rfind(SEPARATOR)
    if index == -1:
        return None
    return token[:index], token[index + 1 :]
