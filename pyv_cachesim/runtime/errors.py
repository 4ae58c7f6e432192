from __future__ import annotations


class InvalidGeometry(ValueError):
    """Raised when a cache geometry cannot be decomposed bitwise."""


class InvariantViolation(RuntimeError):
    """Raised when the per-set recency relation is no longer a strict total order."""
