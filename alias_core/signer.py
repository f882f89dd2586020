"""
Signer — Keyed-Hash Signatures
HMAC-SHA-256 over an alias prefix, with the primitive supplied by the caller.

The Signer never discovers its primitive at import time. It takes a
keyed-hash callable `(key: bytes, message: bytes) -> bytes` in its
constructor, so tests can hand it a mock and hosts can hand it whatever
audited implementation they ship. The default is `cryptography`'s HMAC.
"""

import inspect
from collections.abc import Awaitable, Callable

from cryptography.hazmat.primitives import hashes, hmac

from alias_core.errors import InvalidInputError

DIGEST_SIZE = 32  # SHA-256 output, in bytes

KeyedHash = Callable[[bytes, bytes], bytes | Awaitable[bytes]]


def hmac_sha256(key: bytes, message: bytes) -> bytes:
    """Compute HMAC-SHA-256(key, message)."""
    h = hmac.HMAC(key, hashes.SHA256())
    h.update(message)
    return h.finalize()


def normalize_key(secret_key: str | bytes) -> bytes:
    """Return the secret key as bytes. Text keys are UTF-8 encoded."""
    if isinstance(secret_key, str):
        key = secret_key.encode("utf-8")
    elif isinstance(secret_key, (bytes, bytearray, memoryview)):
        key = bytes(secret_key)
    else:
        raise InvalidInputError(
            f"secret key must be str or bytes, not {type(secret_key).__name__}"
        )
    if not key:
        raise InvalidInputError("secret key must not be empty")
    return key


class Signer:
    """
    Produces deterministic authentication tags for alias prefixes.

    Stateless apart from the injected primitive; one instance can serve any
    number of concurrent calls.

    Args:
        keyed_hash: Callable computing HMAC-SHA-256. May return bytes or an
            awaitable resolving to bytes. Defaults to `hmac_sha256`.
    """

    def __init__(self, keyed_hash: KeyedHash = hmac_sha256):
        self._keyed_hash = keyed_hash

    async def sign(self, secret_key: str | bytes, message: str) -> bytes:
        """
        Sign a text message with the secret key.

        Args:
            secret_key: Non-empty str or bytes.
            message: Any text, including the empty string.

        Returns:
            The DIGEST_SIZE-byte tag.
        """
        return await self.sign_with_key(normalize_key(secret_key), message)

    async def sign_with_key(self, key: bytes, message: str) -> bytes:
        """Sign with a key already passed through normalize_key."""
        tag = self._keyed_hash(key, message.encode("utf-8"))
        if inspect.isawaitable(tag):
            tag = await tag
        if len(tag) != DIGEST_SIZE:
            raise RuntimeError(
                f"keyed hash returned {len(tag)} bytes, expected {DIGEST_SIZE}"
            )
        return bytes(tag)

    async def sign_hex(self, secret_key: str | bytes, message: str) -> str:
        """Sign a message and return the tag as lowercase hex."""
        return (await self.sign(secret_key, message)).hex()


default_signer = Signer()
