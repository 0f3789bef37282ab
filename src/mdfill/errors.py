"""mdfill.errors
=============

Exception hierarchy.  Every error here signals a programming defect or a
caller breaking a contract; none of them describe an expected runtime
condition, so nothing in the package catches and retries them.
"""
from __future__ import annotations

__all__ = ["MdfillError", "ListItemFormatError", "InvariantViolation"]


class MdfillError(Exception):
    """Base class for all mdfill errors."""


class ListItemFormatError(MdfillError, ValueError):
    """The source slice of a list item is not ``<digits><. or )><spaces>``."""


class InvariantViolation(MdfillError, AssertionError):
    """The segmenter produced a token sequence that breaks its own rules."""
