from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised when a caller breaks an input contract (bad window, unsorted extrema, ...)."""
