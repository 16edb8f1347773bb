"""
Immutable value tree produced by the parser.

Every JSON document parses into exactly one of the ``Value`` subclasses
below. Containers hold other values; the tree is built once per parse call and
never mutated afterwards.
"""

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, Optional


class ValueKind(Enum):
    """The closed set of JSON value kinds."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True)
class Value:
    """Base class for all parsed JSON values."""

    kind: ClassVar[ValueKind]

    def to_python(self) -> Any:
        """Convert to the equivalent plain Python data."""
        raise NotImplementedError

    @staticmethod
    def from_python(obj: Any) -> "Value":
        """Build a value tree from plain Python data.

        Accepts ``None``, ``bool``, ``int``, ``float``, ``str``, lists/tuples and
        dicts with string keys. Non-finite floats are rejected because they have
        no JSON representation.
        """
        if obj is None:
            return NULL
        if isinstance(obj, bool):
            return Boolean(obj)
        if isinstance(obj, (int, float)):
            try:
                number = float(obj)
            except OverflowError:
                raise ValueError(f"Number {obj!r} does not fit in a double") from None
            if not math.isfinite(number):
                raise ValueError(f"Non-finite number {obj!r} is not a JSON value")
            return Number(number)
        if isinstance(obj, str):
            return String(obj)
        if isinstance(obj, (list, tuple)):
            return Array(tuple(Value.from_python(item) for item in obj))
        if isinstance(obj, dict):
            members = {}
            for key, item in obj.items():
                if not isinstance(key, str):
                    raise TypeError(
                        f"Object keys must be str, not {type(key).__name__}"
                    )
                members[key] = Value.from_python(item)
            return Object(members)
        raise TypeError(f"Cannot convert {type(obj).__name__} to a JSON value")


@dataclass(frozen=True)
class Null(Value):
    """JSON ``null``."""

    kind = ValueKind.NULL

    def to_python(self) -> None:
        return None


@dataclass(frozen=True)
class Boolean(Value):
    """JSON ``true`` or ``false``."""

    value: bool
    kind = ValueKind.BOOLEAN

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class Number(Value):
    """A JSON number held as a double.

    ``lexeme`` keeps the source text of the literal for callers that want to
    re-interpret it (e.g. as ``Decimal``); it does not take part in equality.
    """

    value: float
    lexeme: Optional[str] = field(default=None, compare=False, repr=False)
    kind = ValueKind.NUMBER

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True)
class String(Value):
    """A decoded JSON string."""

    value: str
    kind = ValueKind.STRING

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class Array(Value):
    """An ordered sequence of values."""

    items: tuple[Value, ...] = ()
    kind = ValueKind.ARRAY

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class Object(Value):
    """A mapping from string keys to values; key order carries no meaning."""

    members: Mapping[str, Value] = field(default_factory=dict)
    kind = ValueKind.OBJECT

    def __post_init__(self) -> None:
        if not isinstance(self.members, MappingProxyType):
            object.__setattr__(self, "members", MappingProxyType(dict(self.members)))

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def __getitem__(self, key: str) -> Value:
        return self.members[key]

    def __hash__(self) -> int:
        return hash(frozenset(self.members.items()))

    def get(self, key: str, default: Optional[Value] = None) -> Optional[Value]:
        """Return the member for ``key`` or ``default``."""
        return self.members.get(key, default)

    def to_python(self) -> dict[str, Any]:
        return {key: item.to_python() for key, item in self.members.items()}


NULL = Null()
TRUE = Boolean(True)
FALSE = Boolean(False)

