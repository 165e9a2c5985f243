"""Per-type JSON converter: a StringEnum instance is encoded as its bare ``value``."""

from __future__ import annotations

import copy
import logging
from typing import Any, Generic

import pydantic_core
from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import PydanticCustomError, core_schema

from .exceptions import ArgumentError, CodecError, ValidationError
from .json_schema import string_enum_schema
from .string_enum import SE, StringEnum

logger = logging.getLogger(__name__)


class StringEnumConverter(Generic[SE]):
    """Read and write one ``StringEnum`` subclass as a JSON string.

    Usable on its own::

        converter = StringEnumConverter(Sample)
        converter.dumps(Sample.OPTION1)   # '"option1"'
        converter.loads('"option2"')      # Sample(value='option2', ...)

    Instances handed to pydantic in Python mode are stored as deep copies,
    the same isolation ``parse`` gives.

    It also works as pydantic metadata, which forces the bare-string shape
    even for classes that opted out of the automatic codec::

        class Payload(BaseModel):
            sample: Annotated[Sample, StringEnumConverter(Sample)]
    """

    def __init__(self, enum_type: type[SE]) -> None:
        if not (isinstance(enum_type, type) and issubclass(enum_type, StringEnum)):
            raise TypeError(f"{enum_type!r} is not a StringEnum subclass")
        self.enum_type = enum_type

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.enum_type.__name__})"

    # ---- Plain read/write ----

    def write(self, instance: SE) -> str:
        return instance.value

    def read(self, token: object) -> SE:
        """Turn a decoded JSON token into a member copy.

        Raises:
            CodecError:      If *token* is not a string.
            ArgumentError:   If *token* is a blank string.
            ValidationError: If *token* names no member.
        """
        if not isinstance(token, str):
            raise CodecError(token, self.enum_type)
        return self.enum_type.parse(token)

    def dumps(self, instance: SE) -> str:
        return pydantic_core.to_json(self.write(instance)).decode()

    def loads(self, data: str | bytes) -> SE:
        return self.read(pydantic_core.from_json(data))

    # ---- pydantic integration ----

    def _validate_text(self, text: str) -> SE:
        try:
            return self.enum_type.parse(text)
        except ArgumentError as exc:
            raise PydanticCustomError(
                "string_enum_blank",
                "{enum_type} requires a non-blank string",
                {"enum_type": self.enum_type.__name__},
            ) from exc
        except ValidationError as exc:
            raise PydanticCustomError(
                "string_enum_member",
                "'{value}' is not a valid {enum_type}",
                {"value": text, "enum_type": self.enum_type.__name__},
            ) from exc

    def __get_pydantic_core_schema__(
        self, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        logger.debug("Building bare-string schema for %s", self.enum_type.__name__)
        from_text = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(self._validate_text),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_text,
            python_schema=core_schema.union_schema(
                [
                    core_schema.no_info_after_validator_function(
                        copy.deepcopy, core_schema.is_instance_schema(self.enum_type)
                    ),
                    from_text,
                ]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                self.write, return_schema=core_schema.str_schema()
            ),
        )

    def __get_pydantic_json_schema__(
        self, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        json_schema = handler.resolve_ref_schema(handler(schema))
        json_schema.update(string_enum_schema(self.enum_type))
        return json_schema
