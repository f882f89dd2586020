"""
email-alias-core
Deterministic, verifiable email aliases for custom domains.

An alias looks like `shop-amazon-1a2b3c4d@example.com`: readable parts, then
a truncated HMAC-SHA-256 tag over those parts, then your domain. Anyone
holding the secret key can check an alias without a database of issued
aliases; nobody without it can forge one.

Usage:
    import asyncio
    from alias_core import generate_email_alias, validate_email_alias

    alias = asyncio.run(generate_email_alias("s3cr3t", ["shop", "amazon"], "example.com"))
    asyncio.run(validate_email_alias("s3cr3t", alias))  # True
"""

from alias_core.codec import (
    DEFAULT_HASH_LENGTH,
    MAX_HASH_LENGTH,
    ParsedAlias,
    build_prefix,
    compose,
    parse,
)
from alias_core.errors import InvalidInputError
from alias_core.generator import generate_email_alias
from alias_core.signer import Signer, hmac_sha256
from alias_core.verifier import validate_email_alias

__version__ = "1.0.0"
__all__ = [
    "generate_email_alias",
    "validate_email_alias",
    "Signer",
    "hmac_sha256",
    "build_prefix",
    "compose",
    "parse",
    "ParsedAlias",
    "InvalidInputError",
    "DEFAULT_HASH_LENGTH",
    "MAX_HASH_LENGTH",
]
