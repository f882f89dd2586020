"""
Verifier — Alias Validation
parse -> sign(prefix) -> truncate -> compare.

Every way an alias can be wrong (bad shape, wrong tag length, non-hex or
uppercase tag, forged signature) gives the same answer: False. Callers
cannot tell which part of a forged alias was off.
"""

import logging

from cryptography.hazmat.primitives import constant_time

from alias_core.codec import DEFAULT_HASH_LENGTH, parse
from alias_core.signer import Signer, default_signer, normalize_key

logger = logging.getLogger(__name__)


def tags_match(expected: str, provided: str) -> bool:
    """Exact, full-length, constant-time comparison of two hex tags."""
    return constant_time.bytes_eq(expected.encode("ascii"), provided.encode("ascii"))


async def validate_email_alias(
    secret_key: str | bytes,
    full_alias: str,
    hash_length: int = DEFAULT_HASH_LENGTH,
    *,
    signer: Signer | None = None,
) -> bool:
    """
    Check that an alias was generated with this secret key.

    Never raises for a malformed alias; returns False instead. A bad
    secret_key or hash_length is a caller error and raises
    InvalidInputError.

    Args:
        secret_key: The master secret used at generation.
        full_alias: Candidate alias, e.g. "shop-amazon-1a2b3c4d@example.com".
        hash_length: Must equal the value used at generation.
        signer: Signer to use instead of the default HMAC-SHA-256 one.

    Returns:
        True only if the alias tag equals the recomputed one.
    """
    key = normalize_key(secret_key)
    parsed = parse(full_alias, hash_length)
    if parsed is None:
        logger.debug("Alias rejected")
        return False

    signature_hex = (await (signer or default_signer).sign_with_key(key, parsed.prefix)).hex()
    if not tags_match(signature_hex[:hash_length], parsed.tag):
        logger.debug("Alias rejected")
        return False
    return True
