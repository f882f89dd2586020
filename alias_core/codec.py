"""
Codec — Alias Grammar
Builds, composes and parses `prefix-tag@domain` strings.

Nothing here touches a key. The grammar is:

    alias  = prefix "-" tag "@" domain
    prefix = parts joined with "-"
    tag    = exactly hash_length chars of [0-9a-f]

Parts are joined without escaping, so a part containing "-" looks the same
as two parts once joined. Parsing never tries to recover the parts: the
last "-<tag>@" boundary wins and the prefix comes back verbatim.
"""

from collections.abc import Sequence
from typing import NamedTuple

from alias_core.errors import InvalidInputError

SEPARATOR = "-"
DEFAULT_HASH_LENGTH = 8
MAX_HASH_LENGTH = 64  # hex length of a SHA-256 digest
HEX_DIGITS = frozenset("0123456789abcdef")
LINE_TERMINATORS = frozenset("\n\r\u2028\u2029")


class ParsedAlias(NamedTuple):
    prefix: str
    tag: str
    domain: str


def check_hash_length(hash_length: int, limit: int = MAX_HASH_LENGTH) -> int:
    """Reject hash lengths outside 1..limit instead of clamping them."""
    if isinstance(hash_length, bool) or not isinstance(hash_length, int):
        raise InvalidInputError(
            f"hash_length must be an int, not {type(hash_length).__name__}"
        )
    if not 1 <= hash_length <= limit:
        raise InvalidInputError(
            f"hash_length must be between 1 and {limit}, got {hash_length}"
        )
    return hash_length


def check_domain(domain: str) -> str:
    """Require a string domain. Its syntax is left to the caller."""
    if not isinstance(domain, str):
        raise InvalidInputError(f"domain must be a string, not {type(domain).__name__}")
    return domain


def build_prefix(parts: Sequence[str]) -> str:
    """
    Join alias parts into the local-part prefix.

    Args:
        parts: Non-empty sequence of non-empty strings, e.g. ["shop", "amazon"].

    Returns:
        The hyphen-joined prefix, e.g. "shop-amazon".

    Raises:
        InvalidInputError: If parts is empty, is a bare string, or holds
            anything other than non-empty strings.
    """
    if isinstance(parts, (str, bytes)) or not isinstance(parts, Sequence):
        raise InvalidInputError("alias parts must be a sequence of strings")
    if len(parts) == 0:
        raise InvalidInputError("alias parts cannot be empty")
    for index, part in enumerate(parts):
        if not isinstance(part, str):
            raise InvalidInputError(
                f"alias part {index} must be a string, not {type(part).__name__}"
            )
        if not part:
            raise InvalidInputError(f"alias part {index} is empty")
    return SEPARATOR.join(parts)


def compose(prefix: str, domain: str, signature_hex: str, hash_length: int) -> str:
    """Assemble `prefix-<truncated signature>@domain`. The domain is not validated."""
    check_hash_length(hash_length, min(MAX_HASH_LENGTH, len(signature_hex)))
    return f"{prefix}{SEPARATOR}{signature_hex[:hash_length]}@{domain}"


def parse(full_alias: str, hash_length: int = DEFAULT_HASH_LENGTH) -> ParsedAlias | None:
    """
    Split an alias into (prefix, tag, domain).

    Returns None when the string does not follow the grammar: not a string,
    empty, containing a line break, no "@" or empty domain, or no "-"
    followed by exactly hash_length lowercase hex characters right before
    the "@". Runs in linear time.
    """
    check_hash_length(hash_length)
    if not isinstance(full_alias, str) or not full_alias:
        return None
    if not LINE_TERMINATORS.isdisjoint(full_alias):
        return None

    local, at, domain = full_alias.rpartition("@")
    if not at or not domain:
        return None

    # Local part must be at least one prefix char, the separator and the tag
    if len(local) < hash_length + 2:
        return None
    boundary = len(local) - hash_length - 1
    if local[boundary] != SEPARATOR:
        return None

    tag = local[boundary + 1:]
    if not HEX_DIGITS.issuperset(tag):
        return None

    return ParsedAlias(local[:boundary], tag, domain)
