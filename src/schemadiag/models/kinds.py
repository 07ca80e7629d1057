"""Closed taxonomy of schema errors, each with a description and optional notes.

Every variant is an immutable dataclass tagged with an ``ErrorCode``. Adding
a new condition means adding one ``ErrorCode`` member and one variant class
implementing ``description()`` (and ``notes()`` when there is more to say).
"""

from __future__ import annotations

from dataclasses import astuple, dataclass
from enum import StrEnum
from typing import ClassVar


class ErrorCode(StrEnum):
    """Discriminant for every error variant. Declaration order is sort order."""

    DATE_TIME_SCALAR_NOT_DEFINED = "date_time_scalar_not_defined"
    DATE_SCALAR_NOT_DEFINED = "date_scalar_not_defined"
    DIRECTIVES_NOT_SUPPORTED = "directives_not_supported"
    NO_QUERY_TYPE = "no_query_type"
    NONNULLABLE_FIELD_WITH_DEFAULT_VALUE = "nonnullable_field_with_default_value"
    NULL_DEFAULT_VALUE = "null_default_value"
    OBJECT_ARGUMENT_WITH_DEFAULT_VALUE = "object_argument_with_default_value"
    SUBSCRIPTIONS_NOT_SUPPORTED = "subscriptions_not_supported"
    TYPE_EXTENSION_NOT_SUPPORTED = "type_extension_not_supported"
    UNION_FIELD_TYPE_MISMATCH = "union_field_type_mismatch"
    UNSUPPORTED_ATTRIBUTE = "unsupported_attribute"
    UNSUPPORTED_ATTRIBUTE_PAIR = "unsupported_attribute_pair"
    VARIABLE_DEFAULT_VALUE = "variable_default_value"


_CODE_ORDER: dict[ErrorCode, int] = {code: i for i, code in enumerate(ErrorCode)}


class _Kind:
    """Behaviour shared by all variants."""

    code: ClassVar[ErrorCode]

    def description(self) -> str:
        raise NotImplementedError

    def notes(self) -> str | None:
        return None

    def sort_key(self) -> tuple[object, ...]:
        return (_CODE_ORDER[self.code], *astuple(self))  # type: ignore[call-overload]


@dataclass(frozen=True)
class DateTimeScalarNotDefined(_Kind):
    code: ClassVar[ErrorCode] = ErrorCode.DATE_TIME_SCALAR_NOT_DEFINED

    def description(self) -> str:
        return "You have to define a custom scalar called `DateTime` to use this type"

    def notes(self) -> str | None:
        return "Insert `scalar DateTime` into your schema"


@dataclass(frozen=True)
class DateScalarNotDefined(_Kind):
    code: ClassVar[ErrorCode] = ErrorCode.DATE_SCALAR_NOT_DEFINED

    def description(self) -> str:
        return "You have to define a custom scalar called `Date` to use this type"

    def notes(self) -> str | None:
        return "Insert `scalar Date` into your schema"


@dataclass(frozen=True)
class DirectivesNotSupported(_Kind):
    code: ClassVar[ErrorCode] = ErrorCode.DIRECTIVES_NOT_SUPPORTED

    def description(self) -> str:
        return "Directives are currently not supported"


@dataclass(frozen=True)
class NoQueryType(_Kind):
    code: ClassVar[ErrorCode] = ErrorCode.NO_QUERY_TYPE

    def description(self) -> str:
        return "Schema doesn't have a root Query type"


@dataclass(frozen=True)
class NonnullableFieldWithDefaultValue(_Kind):
    code: ClassVar[ErrorCode] = ErrorCode.NONNULLABLE_FIELD_WITH_DEFAULT_VALUE

    def description(self) -> str:
        return "Fields with default arguments values must be nullable"


@dataclass(frozen=True)
class NullDefaultValue(_Kind):
    code: ClassVar[ErrorCode] = ErrorCode.NULL_DEFAULT_VALUE

    def description(self) -> str:
        return (
            "Having a default argument value of `null` is not supported. "
            "Use a nullable type instead"
        )


@dataclass(frozen=True)
class ObjectArgumentWithDefaultValue(_Kind):
    code: ClassVar[ErrorCode] = ErrorCode.OBJECT_ARGUMENT_WITH_DEFAULT_VALUE

    def description(self) -> str:
        return "Default arguments where the type is an object is currently not supported"


@dataclass(frozen=True)
class SubscriptionsNotSupported(_Kind):
    code: ClassVar[ErrorCode] = ErrorCode.SUBSCRIPTIONS_NOT_SUPPORTED

    def description(self) -> str:
        return "Subscriptions are currently not supported"

    def notes(self) -> str | None:
        return (
            "Subscriptions are currently not supported by Juniper so we're unsure when\n"
            "or if we'll support them"
        )


@dataclass(frozen=True)
class TypeExtensionNotSupported(_Kind):
    code: ClassVar[ErrorCode] = ErrorCode.TYPE_EXTENSION_NOT_SUPPORTED

    def description(self) -> str:
        return "Type extensions are not supported"


@dataclass(frozen=True)
class UnionFieldTypeMismatch(_Kind):
    """Two members of a union declare the same field with different types.

    ``QueryTrail`` exposes one accessor per field name on the union, so the
    accessor would need a different return type depending on the member.
    """

    code: ClassVar[ErrorCode] = ErrorCode.UNION_FIELD_TYPE_MISMATCH

    union_name: str
    field_name: str
    type_a: str
    field_type_a: str
    type_b: str
    field_type_b: str

    def description(self) -> str:
        return f"Error while generating `QueryTrail` for union `{self.union_name}`"

    def notes(self) -> str | None:
        field = self.field_name
        return "\n".join(
            [
                f"`{self.type_a}.{field}` and `{self.type_b}.{field}` are not the same type",
                f"    `{self.type_a}.{field}` is of type `{self.field_type_a}`",
                f"    `{self.type_b}.{field}` is of type `{self.field_type_b}`",
                "That makes it impossible to generate code for the method "
                f"`QueryTrail<_, {self.union_name}, _>::{field}()`",
                f"It would have to return `{self.field_type_a}` if `{self.union_name}` "
                f"is `{self.type_a}`, but `{self.field_type_b}` if it is a `{self.type_b}`",
            ]
        )


@dataclass(frozen=True)
class UnsupportedAttribute(_Kind):
    code: ClassVar[ErrorCode] = ErrorCode.UNSUPPORTED_ATTRIBUTE

    attribute: str

    def description(self) -> str:
        return f"The attribute {self.attribute} is unsupported"


@dataclass(frozen=True)
class UnsupportedAttributePair(_Kind):
    code: ClassVar[ErrorCode] = ErrorCode.UNSUPPORTED_ATTRIBUTE_PAIR

    attribute: str
    value: str

    def description(self) -> str:
        return f"Unsupported attribute value '{self.value}' for attribute '{self.attribute}'"


@dataclass(frozen=True)
class VariableDefaultValue(_Kind):
    code: ClassVar[ErrorCode] = ErrorCode.VARIABLE_DEFAULT_VALUE

    def description(self) -> str:
        return "Default arguments cannot refer to variables"


# The union of all error variants.
ErrorKind = (
    DateTimeScalarNotDefined
    | DateScalarNotDefined
    | DirectivesNotSupported
    | NoQueryType
    | NonnullableFieldWithDefaultValue
    | NullDefaultValue
    | ObjectArgumentWithDefaultValue
    | SubscriptionsNotSupported
    | TypeExtensionNotSupported
    | UnionFieldTypeMismatch
    | UnsupportedAttribute
    | UnsupportedAttributePair
    | VariableDefaultValue
)

_KINDS: dict[ErrorCode, type[_Kind]] = {cls.code: cls for cls in ErrorKind.__args__}

_missing = set(ErrorCode) - set(_KINDS)
if _missing or len(_KINDS) != len(ErrorKind.__args__):
    raise RuntimeError(f"Error codes without exactly one variant: {sorted(_missing)}")


def kind_for_code(code: ErrorCode | str) -> type[_Kind]:
    """Return the variant class tagged with ``code``."""
    return _KINDS[ErrorCode(code)]


def description(kind: ErrorKind) -> str:
    return kind.description()


def notes(kind: ErrorKind) -> str | None:
    return kind.notes()


def sort_key(kind: ErrorKind) -> tuple[object, ...]:
    """Canonical ordering key: discriminant index, then payload fields."""
    return kind.sort_key()
