"""
Configuration Management for cookie_signature
=============================================

Signing configuration is split into focused sub-configurations. Today the only
tunable part is the keyed-hash reuse cache; the signature format itself
(HMAC-SHA256, unpadded base64, ``.`` separator) is fixed.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from .error_handling import SignatureConfigurationError, log_config_validation

logger = logging.getLogger(__name__)

DEFAULT_HMAC_CACHE_MAXSIZE = 100


@dataclass
class HmacCacheConfig:
    """Configuration for the keyed-hash reuse cache."""

    enabled: bool = True
    maxsize: int = DEFAULT_HMAC_CACHE_MAXSIZE
    track_stats: bool = True

    @log_config_validation("hmac_cache")
    def __post_init__(self):
        """Validate cache configuration."""
        # bool is an int subclass, reject it explicitly
        if isinstance(self.maxsize, bool) or not isinstance(self.maxsize, int):
            raise SignatureConfigurationError(
                "maxsize must be an integer", {"maxsize_type": type(self.maxsize).__name__}
            )
        if self.maxsize <= 0:
            raise SignatureConfigurationError(
                "maxsize must be positive", {"maxsize": self.maxsize}
            )

        logger.debug(
            f"HMAC cache configured: enabled={self.enabled}, maxsize={self.maxsize}, "
            f"stats={self.track_stats}"
        )


class SigningConfig:
    """Main configuration class that combines all sub-configurations."""

    def __init__(
        self,
        hmac_cache: Optional[HmacCacheConfig] = None,
        # Flat shortcuts for the common knobs
        enable_hmac_cache: Optional[bool] = None,
        hmac_cache_maxsize: Optional[int] = None,
    ):
        base = hmac_cache or HmacCacheConfig()

        if enable_hmac_cache is None and hmac_cache_maxsize is None:
            self.hmac_cache = base
        else:
            # New instance; the caller's sub-config stays untouched
            self.hmac_cache = HmacCacheConfig(
                enabled=base.enabled if enable_hmac_cache is None else enable_hmac_cache,
                maxsize=base.maxsize if hmac_cache_maxsize is None else hmac_cache_maxsize,
                track_stats=base.track_stats,
            )

    def __repr__(self) -> str:
        return f"SigningConfig(hmac_cache={self.hmac_cache!r})"

    @property
    def enable_hmac_cache(self) -> bool:
        return self.hmac_cache.enabled

    @property
    def hmac_cache_maxsize(self) -> int:
        return self.hmac_cache.maxsize

    @classmethod
    def create_uncached(cls) -> "SigningConfig":
        """Create a configuration that builds a fresh keyed hash on every call."""
        return cls(hmac_cache=HmacCacheConfig(enabled=False))


def create_signing_config(**overrides) -> SigningConfig:
    """
    Factory function for creating configurations from flat keyword overrides.

    Args:
        **overrides: Values for any sub-configuration field, e.g. ``maxsize=10``

    Returns:
        Configured SigningConfig instance
    """
    config = SigningConfig()

    cache_fields = {f.name for f in fields(HmacCacheConfig)}
    cache_values = {
        "enabled": config.hmac_cache.enabled,
        "maxsize": config.hmac_cache.maxsize,
        "track_stats": config.hmac_cache.track_stats,
    }

    for key, value in overrides.items():
        if key in cache_fields:
            cache_values[key] = value
        elif key == "enable_hmac_cache":
            cache_values["enabled"] = value
        elif key == "hmac_cache_maxsize":
            cache_values["maxsize"] = value
        else:
            logger.warning(f"Unknown configuration parameter ignored: {key}")

    config.hmac_cache = HmacCacheConfig(**cache_values)
    return config


def load_config_from_dict(data: Dict[str, Any]) -> SigningConfig:
    """
    Build a SigningConfig from a nested dictionary.

    Expected shape::

        {"hmac_cache": {"enabled": True, "maxsize": 100, "track_stats": True}}

    Raises:
        SignatureConfigurationError: On unknown sections or keys
    """
    if not isinstance(data, dict):
        raise SignatureConfigurationError(
            "configuration must be a dict", {"type": type(data).__name__}
        )

    unknown_sections = set(data) - {"hmac_cache"}
    if unknown_sections:
        raise SignatureConfigurationError(
            f"Unknown configuration sections: {sorted(unknown_sections)}"
        )

    cache_section = data.get("hmac_cache") or {}
    allowed = {f.name for f in fields(HmacCacheConfig)}
    unknown_keys = set(cache_section) - allowed
    if unknown_keys:
        raise SignatureConfigurationError(
            f"Unknown hmac_cache keys: {sorted(unknown_keys)}"
        )

    return SigningConfig(hmac_cache=HmacCacheConfig(**cache_section))
