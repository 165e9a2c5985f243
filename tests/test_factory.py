"""Tests for automatic converter selection.

Run with: pytest tests/test_factory.py
"""
from __future__ import annotations

import pytest
from pydantic import TypeAdapter

from openstrenum import (
    DEFAULT_FACTORY,
    StringEnum,
    StringEnumConverter,
    StringEnumConverterFactory,
    member,
    skip_codec,
)


# ===================================================================
# Fixtures: reusable enum definitions
# ===================================================================

class Direct(StringEnum["Direct"]):
    A = member("a")


@skip_codec
class Skipped(StringEnum["Skipped"]):
    A = member("a")


class SkippedByKeyword(StringEnum["SkippedByKeyword"], skip_codec=True):
    A = member("a")


class Deeper(Direct):
    B = member("b")


class ChildOfSkipped(Skipped):
    pass


class Unparametrized(StringEnum):
    A = member("a")


# ===================================================================
# can_handle
# ===================================================================

class TestCanHandle:
    def setup_method(self):
        self.factory = StringEnumConverterFactory()

    def test_direct_subclass(self):
        assert self.factory.can_handle(Direct)

    def test_decorator_opt_out(self):
        assert not self.factory.can_handle(Skipped)

    def test_keyword_opt_out(self):
        assert not self.factory.can_handle(SkippedByKeyword)

    def test_two_levels_removed(self):
        assert not self.factory.can_handle(Deeper)

    def test_opt_out_not_inherited(self):
        # Not skipped, but not a direct StringEnum[...] subclass either.
        assert "__string_enum_skip_codec__" not in ChildOfSkipped.__dict__
        assert not self.factory.can_handle(ChildOfSkipped)

    def test_unparametrized_base(self):
        assert not self.factory.can_handle(Unparametrized)

    def test_base_class_itself(self):
        assert not self.factory.can_handle(StringEnum)

    @pytest.mark.parametrize("tp", [str, int, object, "Direct", None])
    def test_unrelated_types(self, tp):
        assert not self.factory.can_handle(tp)


# ===================================================================
# create_converter
# ===================================================================

class TestCreateConverter:
    def test_returns_converter_for_type(self):
        converter = StringEnumConverterFactory().create_converter(Direct)
        assert isinstance(converter, StringEnumConverter)
        assert converter.enum_type is Direct

    def test_refuses_unhandled_type(self):
        with pytest.raises(TypeError, match="not handled"):
            StringEnumConverterFactory().create_converter(Skipped)

    def test_default_factory(self):
        assert isinstance(DEFAULT_FACTORY, StringEnumConverterFactory)
        assert DEFAULT_FACTORY.can_handle(Direct)


# ===================================================================
# Effect on pydantic
# ===================================================================

class TestFactoryInPydantic:
    def test_direct_is_bare_string(self):
        assert TypeAdapter(Direct).dump_json(Direct.A) == b'"a"'

    def test_deeper_falls_back_to_dataclass_shape(self):
        assert TypeAdapter(Deeper).dump_json(Deeper.B) == b'{"value":"b"}'

    def test_keyword_opt_out_falls_back(self):
        assert TypeAdapter(SkippedByKeyword).dump_json(SkippedByKeyword.A) == b'{"value":"a"}'
