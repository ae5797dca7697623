"""
Structured field errors, shared by all validation routines.

Validation never raises for a bad object: problems are accumulated as an
ordered list of `FieldError`s so that callers see every issue in one pass.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel


class ErrorType(str, Enum):
    REQUIRED = "FieldValueRequired"
    INVALID = "FieldValueInvalid"
    FORBIDDEN = "FieldValueForbidden"
    TOO_LONG = "FieldValueTooLong"
    INTERNAL = "InternalError"

    @property
    def description(self) -> str:
        return {
            ErrorType.REQUIRED: "Required value",
            ErrorType.INVALID: "Invalid value",
            ErrorType.FORBIDDEN: "Forbidden",
            ErrorType.TOO_LONG: "Too long",
            ErrorType.INTERNAL: "Internal error",
        }[self]


class FieldPath:
    """
    A dotted path to a field within a resource, e.g. `status.users[2]`.
    Paths are immutable; `child`, `index` and `key` return new paths.
    """

    def __init__(self, *names: str, _parts: tuple[str, ...] = ()):
        self._parts = _parts + tuple(names)

    def child(self, name: str, *more: str) -> "FieldPath":
        return FieldPath(name, *more, _parts=self._parts)

    def index(self, i: int) -> "FieldPath":
        return FieldPath(_parts=self._parts[:-1] + (f"{self._parts[-1]}[{i}]",))

    def key(self, k: str) -> "FieldPath":
        return FieldPath(_parts=self._parts[:-1] + (f"{self._parts[-1]}[{k}]",))

    def __str__(self) -> str:
        return ".".join(self._parts)

    def __repr__(self) -> str:
        return f"FieldPath({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldPath):
            return self._parts == other._parts
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._parts)


class FieldError(BaseModel):
    type: ErrorType
    field: str
    bad_value: Any = None
    detail: str = ""

    def error(self) -> str:
        """
        Human-readable rendering, e.g.
        `spec.displayName: Invalid value: "": must be specified`.
        """
        message = f"{self.field}: {self.type.description}"
        if self.type == ErrorType.INVALID:
            message += f": {_quote(self.bad_value)}"
        if self.detail:
            message += f": {self.detail}"
        return message


ErrorList = list[FieldError]


def _quote(value: Any) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    return repr(value)


def required(path: FieldPath, detail: str = "") -> FieldError:
    return FieldError(type=ErrorType.REQUIRED, field=str(path), detail=detail)


def invalid(path: FieldPath, value: Any, detail: str) -> FieldError:
    return FieldError(
        type=ErrorType.INVALID, field=str(path), bad_value=value, detail=detail
    )


def forbidden(path: FieldPath, detail: str) -> FieldError:
    return FieldError(type=ErrorType.FORBIDDEN, field=str(path), detail=detail)


def too_long(path: FieldPath, value: Any, max_length: int) -> FieldError:
    return FieldError(
        type=ErrorType.TOO_LONG,
        field=str(path),
        bad_value=value,
        detail=f"must have at most {max_length} bytes",
    )


def internal_error(path: FieldPath, err: BaseException | str) -> FieldError:
    return FieldError(type=ErrorType.INTERNAL, field=str(path), detail=str(err))


class GroupInvalidError(Exception):
    """
    Raised by callers that need to reject a group outright; carries the
    full error list.
    """

    def __init__(self, group_name: str, errors: ErrorList):
        self.group_name = group_name
        self.errors = errors
        super().__init__(
            f"LocalGroup {group_name!r} is invalid: "
            + "; ".join(e.error() for e in errors)
        )
