"""
cookie_signature - Tamper-evident signing of cookie values with HMAC-SHA256.

A value signed with a secret becomes ``value.signature``. Verifying the token
with the same secret gives the value back; any change to the token, or a
different secret, gives ``False``.

Key Features:
- HMAC-SHA256 signatures, standard base64 without padding
- Constant-time verification
- Text, bytes and KeyMaterial secrets
- Bounded, thread-safe reuse of keyed-hash engines for text secrets

Quick Start:
    >>> from cookie_signature import sign, unsign
    >>>
    >>> token = sign("hello", "tobiiscool")
    >>> token
    'hello.DGDUkGlIkCzPz+C0B064FNgHdEjox7ch8tOBGslZ5QI'
    >>> unsign(token, "tobiiscool")
    'hello'
    >>> unsign(token, "luna")
    False
"""

from .config import HmacCacheConfig, SigningConfig, create_signing_config, load_config_from_dict
from .error_handling import InvalidArgument, SignatureConfigurationError, SignatureError
from .hmac_cache import HmacCache, get_default_hmac_cache, provision
from .keys import KeyMaterial, SecretKind, classify_secret
from .signer import Signer, get_default_signer, reset_default_signer, sign, unsign

__version__ = "1.0.0"

__all__ = [
    # Signing
    "sign",
    "unsign",
    "Signer",
    "get_default_signer",
    "reset_default_signer",
    # Keyed-hash provisioning
    "HmacCache",
    "get_default_hmac_cache",
    "provision",
    # Secrets
    "KeyMaterial",
    "SecretKind",
    "classify_secret",
    # Configuration
    "HmacCacheConfig",
    "SigningConfig",
    "create_signing_config",
    "load_config_from_dict",
    # Errors
    "SignatureError",
    "InvalidArgument",
    "SignatureConfigurationError",
    # Version info
    "__version__",
]
