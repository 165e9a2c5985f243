"""Decide which StringEnum classes get the bare-string codec automatically."""

from __future__ import annotations

import logging
from typing import Any, TypeVar, get_origin

from .converter import StringEnumConverter
from .string_enum import SKIP_CODEC_ATTR, StringEnum

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)


def skip_codec(cls: T) -> T:
    """Class decorator: keep the default field-by-field JSON shape for *cls*.

    The mark applies to the decorated class only; subclasses don't inherit it.
    """
    setattr(cls, SKIP_CODEC_ATTR, True)
    return cls


def _has_direct_string_enum_base(tp: type) -> bool:
    return any(get_origin(b) is StringEnum for b in tp.__dict__.get("__orig_bases__", ()))


class StringEnumConverterFactory:
    """Hand out :class:`StringEnumConverter` instances for eligible classes.

    A class is eligible when its *immediate* base is a parametrization of
    ``StringEnum`` (``class Sample(StringEnum["Sample"])``) and it doesn't
    carry the ``skip_codec`` mark.  Classes derived further, like
    ``class Special(Sample)``, keep pydantic's default dataclass handling.
    """

    def can_handle(self, tp: object) -> bool:
        if not isinstance(tp, type):
            return False
        if tp.__dict__.get(SKIP_CODEC_ATTR, False):
            return False
        return _has_direct_string_enum_base(tp)

    def create_converter(self, tp: type[Any]) -> StringEnumConverter[Any]:
        if not self.can_handle(tp):
            raise TypeError(f"{tp!r} is not handled by {type(self).__name__}")
        logger.debug("Creating converter for %s", tp.__name__)
        return StringEnumConverter(tp)


DEFAULT_FACTORY = StringEnumConverterFactory()
