"""
Shared fixtures for cookie_signature tests.
"""

import base64
import hashlib
import hmac

import pytest

from cookie_signature import HmacCache, HmacCacheConfig, Signer, SigningConfig
from cookie_signature import get_default_hmac_cache, reset_default_signer

# 32-byte digest -> 44 base64 chars, one of them padding
SIGNATURE_LENGTH = 43


def expected_token(value: str, key: bytes) -> str:
    """Token computed directly with hmac/base64, independent of the library."""
    digest = hmac.new(key, value.encode("utf-8"), hashlib.sha256).digest()
    return value + "." + base64.b64encode(digest).decode("ascii").rstrip("=")


@pytest.fixture
def hmac_cache():
    """An isolated keyed-hash cache with the default bound."""
    return HmacCache()


@pytest.fixture
def small_cache():
    """An isolated keyed-hash cache holding at most three engines."""
    return HmacCache(HmacCacheConfig(maxsize=3))


@pytest.fixture
def signer(hmac_cache):
    """A signer bound to an isolated cache."""
    return Signer(hmac_cache=hmac_cache)


@pytest.fixture
def uncached_signer():
    """A signer that never reuses keyed-hash engines."""
    return Signer(SigningConfig.create_uncached())


@pytest.fixture
def fresh_default_signer():
    """Reset the process-wide signer and cache around a test."""
    get_default_hmac_cache().clear()
    yield reset_default_signer()
    get_default_hmac_cache().clear()
    reset_default_signer()
