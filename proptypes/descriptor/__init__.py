"""Prop type descriptor factory.

Example usage:
    >>> from proptypes.descriptor import to_type
    >>> prop = to_type("string", {"type": str}, validatable=True).with_default("")
"""

from .lib import (
    MISSING,
    BoundValidator,
    PropType,
    PropTypeError,
    Verdict,
    run_validator,
    to_type,
)

__all__ = [
    "MISSING",
    "PropTypeError",
    "Verdict",
    "BoundValidator",
    "run_validator",
    "PropType",
    "to_type",
]
