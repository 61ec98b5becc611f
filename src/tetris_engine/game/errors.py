from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised when a caller passes a token or argument the engine does not recognise."""
