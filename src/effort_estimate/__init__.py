"""Deterministic effort estimation from line-of-code size and risk modifiers."""

from effort_estimate.version import __version__

__all__ = ["__version__"]
