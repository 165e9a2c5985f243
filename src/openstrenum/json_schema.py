from __future__ import annotations

from typing import Any, Dict, List

from .string_enum import StringEnum, get_members

JsonSchema = Dict[str, Any]


def string_enum_schema(
    enum_type: type[StringEnum[Any]],
    *,
    title: str | None = None,
    description: str | None = None,
) -> JsonSchema:
    """
    Build a JSON Schema for the bare-string encoding of a StringEnum class.

    The ``enum`` keyword lists the member values in discovery order, with
    duplicate values collapsed to their first occurrence.  A class without
    members yields an empty ``enum``, which accepts nothing.
    """
    values: List[str] = []
    for m in get_members(enum_type):
        if m.value not in values:
            values.append(m.value)

    schema: JsonSchema = {"type": "string", "enum": values}
    schema["title"] = title or enum_type.__name__
    if description:
        schema["description"] = description
    return schema
