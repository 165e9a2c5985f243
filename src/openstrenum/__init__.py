from __future__ import annotations

import logging

from .string_enum import StringEnum, StringEnumMeta, computed_member, get_members, member, parse, try_parse
from .exceptions import ArgumentError, CodecError, StringEnumError, ValidationError
from .converter import StringEnumConverter
from .factory import DEFAULT_FACTORY, StringEnumConverterFactory, skip_codec
from .json_schema import string_enum_schema

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "StringEnum", "StringEnumMeta",
    "member", "computed_member",
    "get_members", "try_parse", "parse",
    "StringEnumError", "ArgumentError", "ValidationError", "CodecError",
    "StringEnumConverter", "StringEnumConverterFactory", "DEFAULT_FACTORY", "skip_codec",
    "string_enum_schema",
]
