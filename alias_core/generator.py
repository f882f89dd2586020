"""Alias generation: build_prefix -> sign -> compose."""

import logging
from collections.abc import Sequence

from alias_core.codec import DEFAULT_HASH_LENGTH, build_prefix, check_domain, check_hash_length, compose
from alias_core.signer import Signer, default_signer, normalize_key

logger = logging.getLogger(__name__)


async def generate_email_alias(
    secret_key: str | bytes,
    alias_parts: Sequence[str],
    domain: str,
    hash_length: int = DEFAULT_HASH_LENGTH,
    *,
    signer: Signer | None = None,
) -> str:
    """
    Generate a verifiable email alias for a custom domain.

    Deterministic: the same inputs always give the same alias, so nothing
    needs to be stored to validate it later.

    Args:
        secret_key: The master secret.
        alias_parts: Strings forming the readable part, e.g. ["shop", "amazon"].
        domain: Domain appended after "@", e.g. "example.com".
        hash_length: Hex characters of the signature to keep (1-64).
        signer: Signer to use instead of the default HMAC-SHA-256 one.

    Returns:
        The alias, e.g. "shop-amazon-1a2b3c4d@example.com".

    Raises:
        InvalidInputError: If any input is unusable. Raised before hashing.
    """
    prefix = build_prefix(alias_parts)
    check_domain(domain)
    check_hash_length(hash_length)
    key = normalize_key(secret_key)

    signature_hex = (await (signer or default_signer).sign_with_key(key, prefix)).hex()
    alias = compose(prefix, domain, signature_hex, hash_length)

    logger.debug("Generated alias for prefix %r on %r (hash_length=%d)", prefix, domain, hash_length)
    return alias
