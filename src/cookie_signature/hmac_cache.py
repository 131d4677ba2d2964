"""
Keyed-Hash Provisioning
=======================

Builds HMAC-SHA256 engines bound to a secret and reuses them for text secrets.

Architecture:
    Signer → HmacCache.provision(secret) → copy of the pristine keyed engine → update/digest

Features:
- Bounded reuse cache keyed by text secret (cachetools ``FIFOCache``)
- Strict insertion-order eviction; a hit does not refresh an entry
- Bytes and KeyMaterial secrets are never cached
- One lock guards lookup, insert and eviction together
- Optional hit/miss/eviction statistics

Cached engines never leave the cache. ``provision`` hands out a copy, so
callers may feed the returned engine freely.
"""

import hashlib
import hmac
import logging
import threading
from typing import Any, Dict, Optional

from cachetools import FIFOCache

from .config import HmacCacheConfig
from .keys import Secret, SecretKind, classify_secret

logger = logging.getLogger(__name__)


def new_keyed_hash(key: bytes):
    """Create a fresh HMAC-SHA256 engine keyed with ``key``."""
    return hmac.new(key, digestmod=hashlib.sha256)


class _EvictionCountingFIFOCache(FIFOCache):
    """FIFOCache that counts the entries it evicts."""

    def __init__(self, maxsize: int):
        super().__init__(maxsize)
        self.evictions = 0

    def popitem(self):
        key, value = super().popitem()
        self.evictions += 1
        logger.debug(f"HMAC cache evicted oldest entry (size={len(self)})")
        return key, value


class HmacCache:
    """
    Bounded, thread-safe store of keyed-hash engines for text secrets.

    Instances are independent; the process-wide one is available through
    :func:`get_default_hmac_cache`.
    """

    def __init__(self, config: Optional[HmacCacheConfig] = None):
        """
        Initialize the keyed-hash cache.

        Args:
            config: Cache settings (uses defaults if None)
        """
        self.config = config or HmacCacheConfig()
        self._lock = threading.RLock()

        if self.config.enabled:
            self._cache = _EvictionCountingFIFOCache(self.config.maxsize)
        else:
            self._cache = None

        self._hits = 0
        self._misses = 0
        self._bypasses = 0

        if self._cache is not None:
            logger.info(f"HMAC cache enabled: fifo (maxsize={self.config.maxsize})")
        else:
            logger.info("HMAC cache disabled, engines are built per call")

    @property
    def enabled(self) -> bool:
        return self._cache is not None

    @property
    def maxsize(self) -> int:
        return self.config.maxsize

    def provision(self, secret: Secret):
        """
        Return a keyed-hash engine bound to ``secret``.

        Text secrets are served from the cache, building and inserting the
        engine on a miss. The caller always receives a copy, never the cached
        engine itself. Other secrets get a new engine on every call.

        Raises:
            InvalidArgument: If the secret is missing or of an unsupported type
        """
        kind, key = classify_secret(secret)

        if kind is not SecretKind.TEXT or self._cache is None:
            if self.config.track_stats:
                with self._lock:
                    self._bypasses += 1
            return new_keyed_hash(key)

        with self._lock:
            handle = self._cache.get(secret)
            if handle is not None:
                if self.config.track_stats:
                    self._hits += 1
                return handle.copy()

            if self.config.track_stats:
                self._misses += 1
            handle = new_keyed_hash(key)
            self._cache[secret] = handle
            logger.debug(f"HMAC cache miss, engine cached (size={len(self._cache)})")
            return handle.copy()

    def __contains__(self, secret) -> bool:
        if self._cache is None or not isinstance(secret, str):
            return False
        with self._lock:
            return secret in self._cache

    def __len__(self) -> int:
        if self._cache is None:
            return 0
        with self._lock:
            return len(self._cache)

    def clear(self):
        """Drop every cached engine and reset statistics."""
        with self._lock:
            if self._cache is not None:
                self._cache = _EvictionCountingFIFOCache(self.config.maxsize)
            self._hits = 0
            self._misses = 0
            self._bypasses = 0
        logger.debug("HMAC cache cleared")

    def get_cache_stats(self) -> Dict[str, Any]:
        """Get cache statistics (empty dict when stats are disabled)."""
        if not self.config.track_stats:
            return {}

        with self._lock:
            lookups = self._hits + self._misses
            hit_rate = self._hits / lookups if lookups > 0 else 0.0
            return {
                "hmac_cache_enabled": self._cache is not None,
                "hmac_cache_size": len(self._cache) if self._cache is not None else 0,
                "hmac_cache_maxsize": self.config.maxsize,
                "hmac_cache_hits": self._hits,
                "hmac_cache_misses": self._misses,
                "hmac_cache_evictions": self._cache.evictions if self._cache is not None else 0,
                "hmac_cache_bypasses": self._bypasses,
                "hmac_cache_hit_rate": round(hit_rate, 3),
            }


_default_cache: Optional[HmacCache] = None
_default_cache_lock = threading.Lock()


def get_default_hmac_cache() -> HmacCache:
    """Get the process-wide cache, creating it if necessary."""
    global _default_cache
    with _default_cache_lock:
        if _default_cache is None:
            _default_cache = HmacCache()
        return _default_cache


def provision(secret: Secret, cache: Optional[HmacCache] = None):
    """Return a keyed-hash engine for ``secret`` from ``cache`` or the default cache."""
    if cache is None:
        cache = get_default_hmac_cache()
    return cache.provision(secret)
