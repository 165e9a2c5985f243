from __future__ import annotations

from typing import Any


class StringEnumError(Exception):
    """Base class for every error raised by ``openstrenum``."""


class ArgumentError(StringEnumError, ValueError):
    """Raised when ``parse``/``try_parse`` receive ``None``, a non-string, or blank text.

    This is always a caller bug: the lookup is never attempted.
    """


class ValidationError(StringEnumError, ValueError):
    """Raised by ``parse`` when the text does not name any member.

    Attributes:
        value:     The rejected text.
        enum_type: The ``StringEnum`` subclass the text was checked against.
    """

    def __init__(self, value: str, enum_type: type[Any]) -> None:
        self.value = value
        self.enum_type = enum_type
        super().__init__(f"The value {value!r} is not a valid {enum_type.__name__}")


class CodecError(StringEnumError, TypeError):
    """Raised when a JSON token of the wrong shape is read where a member is expected."""

    def __init__(self, token: object, enum_type: type[Any]) -> None:
        self.token = token
        self.enum_type = enum_type
        super().__init__(
            f"Expected a JSON string for {enum_type.__name__}, "
            f"got {type(token).__name__} {token!r}"
        )
