"""
Secret shapes accepted by the signer.

A secret is one of three variants:

- ``TEXT``: a ``str``; UTF-8 encoded to form the HMAC key. The only variant
  eligible for keyed-hash reuse, keyed by string equality.
- ``BYTES``: ``bytes``, ``bytearray`` or ``memoryview``.
- ``KEY_MATERIAL``: a :class:`KeyMaterial` instance, an opaque key holder.
"""

from enum import Enum
from typing import NamedTuple, Union

from .error_handling import InvalidArgument


class KeyMaterial:
    """Opaque, immutable holder for raw key bytes.

    Equality is identity, so two holders of the same bytes never alias.
    """

    __slots__ = ("_key",)

    def __init__(self, key: Union[bytes, bytearray, memoryview]):
        if not isinstance(key, (bytes, bytearray, memoryview)):
            raise InvalidArgument(
                "key material must be bytes-like", {"key_type": type(key).__name__}
            )
        object.__setattr__(self, "_key", bytes(key))

    def __setattr__(self, name, value):
        raise AttributeError("KeyMaterial is immutable")

    def __repr__(self) -> str:
        return f"KeyMaterial(<{len(self._key)} bytes>)"

    def __len__(self) -> int:
        return len(self._key)

    def export(self) -> bytes:
        """Return the raw key bytes."""
        return self._key


class SecretKind(Enum):
    TEXT = "text"
    BYTES = "bytes"
    KEY_MATERIAL = "key_material"


class ClassifiedSecret(NamedTuple):
    kind: SecretKind
    key: bytes


Secret = Union[str, bytes, bytearray, memoryview, KeyMaterial]


def classify_secret(secret: Secret) -> ClassifiedSecret:
    """
    Dispatch a secret to its variant and the bytes used as the HMAC key.

    Raises:
        InvalidArgument: If the secret is missing or of an unsupported type
    """
    if secret is None:
        raise InvalidArgument("secret must be provided")

    if isinstance(secret, str):
        return ClassifiedSecret(SecretKind.TEXT, secret.encode("utf-8", "surrogatepass"))
    if isinstance(secret, (bytes, bytearray, memoryview)):
        return ClassifiedSecret(SecretKind.BYTES, bytes(secret))
    if isinstance(secret, KeyMaterial):
        return ClassifiedSecret(SecretKind.KEY_MATERIAL, secret.export())

    raise InvalidArgument(
        "secret must be a str, bytes-like object or KeyMaterial",
        {"secret_type": type(secret).__name__},
    )
