"""Error-value model: positions, the error taxonomy, and schema errors."""

from schemadiag.models.errors import SchemaError, collect_errors
from schemadiag.models.kinds import (
    DateScalarNotDefined,
    DateTimeScalarNotDefined,
    DirectivesNotSupported,
    ErrorCode,
    ErrorKind,
    NonnullableFieldWithDefaultValue,
    NoQueryType,
    NullDefaultValue,
    ObjectArgumentWithDefaultValue,
    SubscriptionsNotSupported,
    TypeExtensionNotSupported,
    UnionFieldTypeMismatch,
    UnsupportedAttribute,
    UnsupportedAttributePair,
    VariableDefaultValue,
)
from schemadiag.models.position import Position

__all__ = [
    "DateScalarNotDefined",
    "DateTimeScalarNotDefined",
    "DirectivesNotSupported",
    "ErrorCode",
    "ErrorKind",
    "NoQueryType",
    "NonnullableFieldWithDefaultValue",
    "NullDefaultValue",
    "ObjectArgumentWithDefaultValue",
    "Position",
    "SchemaError",
    "SubscriptionsNotSupported",
    "TypeExtensionNotSupported",
    "UnionFieldTypeMismatch",
    "UnsupportedAttribute",
    "UnsupportedAttributePair",
    "VariableDefaultValue",
    "collect_errors",
]
