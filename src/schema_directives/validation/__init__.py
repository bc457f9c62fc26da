"""
Value validation routines used by directives.
"""

from __future__ import annotations

from .length import LengthValidator, LengthValueError, measure_length

__all__ = [
    "LengthValidator",
    "LengthValueError",
    "measure_length",
]
