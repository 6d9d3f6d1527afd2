"""
Error kinds raised by the game core.

Both are raised synchronously to the immediate caller and never retried.
"""


class InvalidArgumentError(ValueError):
    """Malformed coordinates, negative pieces, bad configuration."""


class InvalidStateError(RuntimeError):
    """Move against a full board or placement on an occupied cell."""
