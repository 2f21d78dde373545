"""proptypes: runtime prop type descriptors and validation for components."""

from proptypes.builders import (
    ShapePropType,
    array_of,
    custom,
    instance_of,
    object_of,
    one_of,
    one_of_type,
    shape,
)
from proptypes.descriptor import (
    MISSING,
    BoundValidator,
    PropType,
    PropTypeError,
    Verdict,
    to_type,
)
from proptypes.registry import ExtensionSpec, PropTypes, noop, prop_types
from proptypes.validation import validate, validate_type

__all__ = [
    # Descriptors
    "MISSING",
    "PropType",
    "PropTypeError",
    "BoundValidator",
    "Verdict",
    "to_type",
    # Validation
    "validate_type",
    "validate",
    # Builders
    "ShapePropType",
    "custom",
    "one_of",
    "instance_of",
    "array_of",
    "object_of",
    "shape",
    "one_of_type",
    # Namespace
    "ExtensionSpec",
    "PropTypes",
    "prop_types",
    "noop",
]
