"""
StringEnum: closed, string-backed value types with open member sets.

A ``StringEnum`` subclass is a small dataclass whose identity is its
``value`` string.  Its legal values are whatever instances of the class are
bound to public class attributes, discovered at call time::

    class Sample(StringEnum["Sample"]):
        number: int = 0

        OPTION1 = member("option1", number=1)
        OPTION2 = member("option2", number=2)

    Sample.get_members()        # [Sample(value='option1', number=1), ...]
    Sample.parse("option2")     # a fresh copy of Sample.OPTION2
    Sample.try_parse("nope")    # (None, False)
    Sample.OPTION1 == "option1" # True

Subclasses extend the member set simply by declaring more attributes.
Duplicate values are permitted; lookups resolve to the first one declared.
"""

from __future__ import annotations

import copy
import dataclasses
import inspect
import logging
from typing import Any, Callable, Generic, Iterator, TypeVar

from .exceptions import ArgumentError, ValidationError

logger = logging.getLogger(__name__)

SE = TypeVar("SE", bound="StringEnum[Any]")

# Own-namespace flag read by the codec factory; never inherited.
SKIP_CODEC_ATTR = "__string_enum_skip_codec__"


# ---------------------------------------------------------------------------
# Member declarations
# ---------------------------------------------------------------------------

class member:
    """Declare a member inside the class body.

    The placeholder is replaced by ``cls(value, **fields)`` as soon as the
    class has been created, so the binding is evaluated exactly once.
    """

    __slots__ = ("value", "fields")

    def __init__(self, value: str, /, **fields: Any) -> None:
        self.value = value
        self.fields = fields

    def build(self, owner: type[SE]) -> SE:
        return owner(self.value, **self.fields)

    def __repr__(self) -> str:
        return f"member({self.value!r})"


class computed_member(Generic[SE]):
    """Declare a member whose instance is rebuilt on every access::

        class Sample(StringEnum["Sample"]):
            @computed_member
            def LATEST(cls):
                return cls("option2")

    ``Sample.LATEST`` calls the function with the owning class each time it is
    read, and discovery does the same on each pass.
    """

    def __init__(self, fget: Callable[[type[SE]], SE | None]) -> None:
        self.fget = fget
        self.__doc__ = fget.__doc__
        self.__name__ = fget.__name__

    def __get__(self, instance: object, owner: type[SE] | None = None) -> SE | None:
        if owner is None:
            owner = type(instance)
        return self.fget(owner)


# ---------------------------------------------------------------------------
# Discovery and parsing
# ---------------------------------------------------------------------------

def _is_descriptor(obj: object) -> bool:
    """Return ``True`` for functions, methods and other descriptors.

    These are class infrastructure and never members, whatever they return.
    """
    return (
        inspect.isroutine(obj)
        or isinstance(obj, (classmethod, staticmethod, property))
        or hasattr(type(obj), "__get__")
    )


def _declared_slots(enum_type: type) -> dict[str, Any]:
    # Root first, so a redeclared name keeps its original position but
    # resolves to the most derived binding.
    slots: dict[str, Any] = {}
    for klass in reversed(enum_type.__mro__):
        for name, raw in vars(klass).items():
            if not name.startswith("_"):
                slots[name] = raw
    return slots


def get_members(enum_type: type[SE]) -> list[SE]:
    """Discover the members declared on *enum_type* and its bases.

    Field-like bindings come first, then ``computed_member`` accessors, each
    group in declaration order.  Only values that are instances of
    *enum_type* itself are kept; ``None``, foreign values and descriptors are
    skipped.  Nothing is cached: every call walks the class again.
    """
    bound: list[Any] = []
    computed: list[Any] = []
    for raw in _declared_slots(enum_type).values():
        if isinstance(raw, computed_member):
            computed.append(raw.__get__(None, enum_type))
        elif not _is_descriptor(raw):
            bound.append(raw)

    members = [v for v in (*bound, *computed) if isinstance(v, enum_type)]
    logger.debug("Discovered %d %s members", len(members), enum_type.__name__)
    return members


def _require_text(text: object) -> str:
    if not isinstance(text, str) or not text.strip():
        raise ArgumentError(f"Expected a non-blank string, got {text!r}")
    return text


def try_parse(enum_type: type[SE], text: str) -> tuple[SE | None, bool]:
    """Look up the first member of *enum_type* whose value equals *text*.

    Comparison is exact and case sensitive.  On a match, returns a deep copy
    of the member and ``True``; otherwise ``(None, False)``.

    Raises:
        ArgumentError: If *text* is ``None``, not a string, or blank.
    """
    _require_text(text)
    for candidate in get_members(enum_type):
        if candidate.value == text:
            return copy.deepcopy(candidate), True
    logger.debug("%r matches no %s member", text, enum_type.__name__)
    return None, False


def parse(enum_type: type[SE], text: str) -> SE:
    """Like :func:`try_parse`, but raise instead of returning ``False``.

    Raises:
        ArgumentError:   If *text* is ``None``, not a string, or blank.
        ValidationError: If *text* names no member of *enum_type*.
    """
    result, found = try_parse(enum_type, text)
    if not found:
        raise ValidationError(text, enum_type)
    return result  # type: ignore[return-value]


# ---------------------------------------------------------------------------
# Metaclass
# ---------------------------------------------------------------------------

class StringEnumMeta(type):
    """Metaclass that powers ``StringEnum``.

    1. **Dataclass shape**: every class becomes a standard dataclass with
       ``eq=False``, so the equality and ordering defined on ``StringEnum``
       are kept.
    2. **Eager members**: ``member(...)`` placeholders in the class body are
       replaced by real instances once the class exists.
    3. **Container protocol**: ``for m in Sample`` and ``"x" in Sample``
       operate on the discovered members.
    4. **Mutation prevention**: declared members can't be rebound or deleted.
    """

    def __new__(
        mcls,
        name: str,
        bases: tuple[type, ...],
        ns: dict[str, Any],
        *,
        skip_codec: bool = False,
        **kwds: Any,
    ) -> StringEnumMeta:
        """Create the class, apply the dataclass transform and build members.

        Args:
            skip_codec: If ``True``, mark the class so the automatic JSON
                codec leaves it alone (same as the ``@skip_codec`` decorator).
        """
        cls = super().__new__(mcls, name, bases, ns, **kwds)
        cls = dataclasses.dataclass(cls, eq=False)

        for attr, raw in ns.items():
            if isinstance(raw, member):
                type.__setattr__(cls, attr, raw.build(cls))
        if skip_codec:
            type.__setattr__(cls, SKIP_CODEC_ATTR, True)
        return cls

    def __iter__(cls: type[SE]) -> Iterator[SE]:
        return iter(get_members(cls))

    def __contains__(cls, item: object) -> bool:
        """Test whether *item* (a string or an instance) names a member.

        Returns ``False`` for blank or foreign values instead of raising.
        """
        text = item.value if isinstance(item, cls) else item
        if not isinstance(text, str) or not text.strip():
            return False
        return any(m.value == text for m in get_members(cls))

    def _is_declared_member(cls, name: str) -> bool:
        raw = cls.__dict__.get(name)
        return isinstance(raw, (cls, computed_member))

    def __setattr__(cls, name: str, value: Any) -> None:
        if cls._is_declared_member(name):
            raise AttributeError(f"Cannot reassign '{cls.__name__}.{name}'")
        super().__setattr__(name, value)

    def __delattr__(cls, name: str) -> None:
        if cls._is_declared_member(name):
            raise AttributeError(f"Cannot delete '{cls.__name__}.{name}'")
        super().__delattr__(name)


# ---------------------------------------------------------------------------
# Base class
# ---------------------------------------------------------------------------

class StringEnum(Generic[SE], metaclass=StringEnumMeta):
    """Base class for string-backed value types.

    Subclass it parametrized with the subclass itself and declare members as
    public class attributes::

        class Color(StringEnum["Color"]):
            RED = member("red")
            GREEN = member("green")

        Color.RED.value            # "red"
        Color.parse("red")         # Color(value='red'), an independent copy
        Color.RED == "red"         # True
        Color.RED < Color.GREEN    # ordinal comparison of ``value``

    Extra dataclass fields may be declared on the subclass; they take part in
    instance equality but never in lookups.  ``value`` can't be reassigned
    once set.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(
                f"{type(self).__name__}.value must be a str, got {type(self.value).__name__}"
            )

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "value" and "value" in self.__dict__:
            raise AttributeError(f"Cannot reassign '{type(self).__name__}.value'")
        super().__setattr__(name, value)

    # ---- Lookup ----

    @classmethod
    def get_members(cls: type[SE]) -> list[SE]:
        """Return the declared members, rediscovered on each call."""
        return get_members(cls)

    @classmethod
    def try_parse(cls: type[SE], text: str) -> tuple[SE | None, bool]:
        """Return ``(copy_of_member, True)`` or ``(None, False)``."""
        return try_parse(cls, text)

    @classmethod
    def parse(cls: type[SE], text: str) -> SE:
        """Return a copy of the member named *text*, or raise ``ValidationError``."""
        return parse(cls, text)

    # ---- pydantic integration ----

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> Any:
        """Use the bare-string converter when the default factory handles *cls*.

        Other subclasses (opted out, or derived further) fall back to
        pydantic's dataclass schema.
        """
        from .factory import DEFAULT_FACTORY
        if DEFAULT_FACTORY.can_handle(cls):
            return DEFAULT_FACTORY.create_converter(cls).__get_pydantic_core_schema__(source, handler)
        logger.debug("%s falls back to the default dataclass schema", cls.__name__)
        return handler(source)

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> Any:
        from .factory import DEFAULT_FACTORY
        if DEFAULT_FACTORY.can_handle(cls):
            return DEFAULT_FACTORY.create_converter(cls).__get_pydantic_json_schema__(schema, handler)
        return handler(schema)

    # ---- Equality ----

    def _field_values(self) -> tuple[Any, ...]:
        return tuple(getattr(self, f.name) for f in dataclasses.fields(self) if f.compare)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.value == other
        if other.__class__ is self.__class__:
            return self._field_values() == other._field_values()  # type: ignore[attr-defined]
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    # ---- Ordering ----

    def _same_family(self, other: object) -> bool:
        # One class derives from the other, e.g. Sample and Extended(Sample).
        return isinstance(other, type(self)) or isinstance(self, type(other))

    def compare_to(self, other: StringEnum[Any] | None) -> int:
        """Compare ``value`` by code point, returning ``-1``, ``0`` or ``1``.

        ``None`` sorts after every instance, so ``compare_to(None)`` is
        ``-1``.

        Raises:
            TypeError: If *other* is neither ``None`` nor an instance of the
                same ``StringEnum`` family (a base or subclass of this type).
        """
        if other is None:
            return -1
        if not isinstance(other, StringEnum) or not self._same_family(other):
            raise TypeError(
                f"Cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        return (self.value > other.value) - (self.value < other.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, StringEnum) or not self._same_family(other):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, StringEnum) or not self._same_family(other):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, StringEnum) or not self._same_family(other):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, StringEnum) or not self._same_family(other):
            return NotImplemented
        return self.compare_to(other) >= 0

    @staticmethod
    def sort_key(item: StringEnum[Any] | None) -> tuple[bool, str]:
        """Key for ``sorted()`` over sequences that may hold ``None`` (sorted last)."""
        if item is None:
            return True, ""
        return False, item.value

    def __str__(self) -> str:
        return self.value
