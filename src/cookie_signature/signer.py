"""
Cookie Value Signing
====================

Sign a string value with a secret and verify it later.

Usage:
    >>> from cookie_signature import sign, unsign
    >>> token = sign("user-42", "my-secret")
    >>> unsign(token, "my-secret")
    'user-42'
    >>> unsign(token, "other-secret")
    False

Security Model:
- HMAC-SHA256 over the UTF-8 bytes of the value
- Signature is standard base64 with padding stripped
- Verification recomputes the token and compares in constant time
- Integrity only; the value is not hidden
"""

import logging
import threading
from typing import Optional, Union

from .compare import timing_safe_equal
from .config import SigningConfig
from .encoding import encode_signature, encode_text, join_token, split_token
from .error_handling import InvalidArgument, log_signing_performance
from .hmac_cache import HmacCache, get_default_hmac_cache
from .keys import Secret

logger = logging.getLogger(__name__)


class Signer:
    """
    Signs and verifies tokens using an injectable keyed-hash cache.
    """

    def __init__(
        self,
        config: Optional[SigningConfig] = None,
        hmac_cache: Optional[HmacCache] = None,
    ):
        """
        Initialize the signer.

        Args:
            config: Signing configuration (uses defaults if None)
            hmac_cache: Keyed-hash cache to use. Takes precedence over
                ``config.hmac_cache``, which is then ignored
        """
        self.config = config or SigningConfig()
        if config is not None and hmac_cache is not None:
            logger.debug("Signer given an explicit hmac_cache, ignoring config.hmac_cache")
        # HmacCache defines __len__, so an empty one is falsy
        if hmac_cache is None:
            hmac_cache = HmacCache(self.config.hmac_cache)
        self.hmac_cache = hmac_cache

    def provision(self, secret: Secret):
        """Return a fresh keyed-hash engine for ``secret`` from this signer's cache."""
        return self.hmac_cache.provision(secret)

    @log_signing_performance
    def sign(self, value: str, secret: Secret) -> str:
        """
        Sign ``value`` with ``secret``.

        Returns:
            ``value + "." + signature``

        Raises:
            InvalidArgument: If value is not a str or secret is missing
        """
        if not isinstance(value, str):
            raise InvalidArgument(
                "value must be a string", {"value_type": type(value).__name__}
            )
        if secret is None:
            raise InvalidArgument("secret must be provided")

        engine = self.hmac_cache.provision(secret)
        engine.update(encode_text(value))
        return join_token(value, encode_signature(engine.digest()))

    @log_signing_performance
    def unsign(self, token: str, secret: Secret) -> Union[str, bool]:
        """
        Verify ``token`` against ``secret``.

        Returns:
            The original value, or False if the signature is missing or wrong

        Raises:
            InvalidArgument: If token is not a str or secret is missing
        """
        if not isinstance(token, str):
            raise InvalidArgument(
                "signed cookie string must be provided",
                {"token_type": type(token).__name__},
            )
        if secret is None:
            raise InvalidArgument("secret must be provided")

        parts = split_token(token)
        if parts is None:
            logger.debug("Token has no separator, rejecting")
            return False

        candidate = parts[0]
        expected = encode_text(self.sign(candidate, secret))
        received = encode_text(token)

        if len(expected) != len(received):
            logger.debug("Token length mismatch, rejecting")
            return False

        if timing_safe_equal(expected, received):
            return candidate

        logger.debug("Token signature mismatch, rejecting")
        return False

    def get_cache_stats(self):
        return self.hmac_cache.get_cache_stats()


_default_signer: Optional[Signer] = None
_default_signer_lock = threading.Lock()


def get_default_signer() -> Signer:
    """Get the process-wide signer, creating it if necessary."""
    global _default_signer
    with _default_signer_lock:
        if _default_signer is None:
            _default_signer = Signer(hmac_cache=get_default_hmac_cache())
        return _default_signer


def reset_default_signer(config: Optional[SigningConfig] = None) -> Signer:
    """Replace the process-wide signer with one built from ``config``."""
    global _default_signer
    with _default_signer_lock:
        if config is None:
            _default_signer = Signer(hmac_cache=get_default_hmac_cache())
        else:
            _default_signer = Signer(config)
        return _default_signer


def sign(value: str, secret: Secret) -> str:
    """Sign ``value`` with ``secret`` using the process-wide signer."""
    return get_default_signer().sign(value, secret)


def unsign(token: str, secret: Secret) -> Union[str, bool]:
    """Verify ``token`` with ``secret`` using the process-wide signer."""
    return get_default_signer().unsign(token, secret)
