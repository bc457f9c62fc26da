"""
Built-in directive definitions.
"""

from __future__ import annotations

from .base import DirectiveDefinition
from .case import CaseDirective, LowercaseDirective, UppercaseDirective, lowercase_directive, uppercase_directive
from .date import DateDirective, date_directive, format_date
from .inherits import InheritanceResolver, InheritsDirective, inherit_fields, inherits_directive
from .length import LengthConstrainedScalar, LengthConstraint, LengthDirective, length_directive

__all__ = [
    "DirectiveDefinition",
    # Case
    "CaseDirective",
    "LowercaseDirective",
    "UppercaseDirective",
    "lowercase_directive",
    "uppercase_directive",
    # Date
    "DateDirective",
    "date_directive",
    "format_date",
    # Inheritance
    "InheritanceResolver",
    "InheritsDirective",
    "inherit_fields",
    "inherits_directive",
    # Length
    "LengthConstrainedScalar",
    "LengthConstraint",
    "LengthDirective",
    "length_directive",
]
