"""
Error classes for clearer exception sources.
"""
from __future__ import annotations

class DuelSimError(Exception):
    pass

class InvalidArgumentError(DuelSimError, ValueError):
    """Bad archetype name, non-positive max health or empty display name."""

class InvalidStateError(DuelSimError, RuntimeError):
    """Battle engine asked to do something its current state does not allow."""
