"""Errors raised by alias_core."""


class InvalidInputError(ValueError):
    """Raised before any hashing when caller-supplied input is unusable.

    Messages describe what was wrong with the input, never the secret key.
    """
