"""Exceptions raised by the estimation core."""

from __future__ import annotations


class InvalidInput(ValueError):
    """Raised when a request cannot be estimated.

    Covers negative or non-integral LOC estimates and modifier ids that are
    not in the catalog. Raised before any computation, so no partial result
    is ever produced.
    """
