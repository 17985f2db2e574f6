"""Destination handles that parsed values are written into.

Python has no pointers, so a destination is an explicit reference object
wrapping caller-owned storage. Two flavors are provided:

- [`Ref`][envscalar.destination.Ref]: A standalone mutable box.
- [`AttrRef`][envscalar.destination.AttrRef]: A reference to an attribute of
    an object the caller owns, e.g. a field of a config dataclass.

```python
from envscalar import Ref, Kind, parse

port = Ref(0, Kind.UINT16)
parse("PORT", port)
print(port.value)
```
"""

from __future__ import annotations

import abc
import enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Kind(enum.Enum):
    """Scalar kind of a destination.

    Only `STR` and the integer kinds are supported. The remaining members are
    recognised so that unsupported destinations can be reported by name.
    """

    STR = "str"
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    BOOL = "bool"
    FLOAT = "float"
    COMPLEX = "complex"
    BYTES = "bytes"
    LIST = "list"
    TUPLE = "tuple"
    DICT = "dict"
    SET = "set"

    @property
    def is_signed(self) -> bool:
        """Whether this is a signed integer kind."""
        return self in _SIGNED_WIDTHS

    @property
    def is_unsigned(self) -> bool:
        """Whether this is an unsigned integer kind."""
        return self in _UNSIGNED_WIDTHS

    @property
    def is_supported(self) -> bool:
        """Whether values can be parsed into this kind."""
        return self is Kind.STR or self.is_signed or self.is_unsigned

    @property
    def width(self) -> int | None:
        """Fixed bit width of an integer kind.

        `None` for native-width kinds and for non-integer kinds.
        """
        return _SIGNED_WIDTHS.get(self, _UNSIGNED_WIDTHS.get(self))

    @classmethod
    def of(cls, value: Any) -> Kind | None:
        """Infer the kind of a Python value, or `None` if unrecognised."""
        # bool is a subclass of int, so it must be checked first.
        for type_, kind in _PYTHON_KINDS:
            if isinstance(value, type_):
                return kind
        return None


_SIGNED_WIDTHS: dict[Kind, int | None] = {
    Kind.INT: None,
    Kind.INT8: 8,
    Kind.INT16: 16,
    Kind.INT32: 32,
    Kind.INT64: 64,
}
_UNSIGNED_WIDTHS: dict[Kind, int | None] = {
    Kind.UINT: None,
    Kind.UINT8: 8,
    Kind.UINT16: 16,
    Kind.UINT32: 32,
    Kind.UINT64: 64,
}
_PYTHON_KINDS: list[tuple[type, Kind]] = [
    (bool, Kind.BOOL),
    (int, Kind.INT),
    (str, Kind.STR),
    (float, Kind.FLOAT),
    (complex, Kind.COMPLEX),
    (bytes, Kind.BYTES),
    (list, Kind.LIST),
    (tuple, Kind.TUPLE),
    (dict, Kind.DICT),
    (set, Kind.SET),
]


def type_name_of(value: Any) -> str:
    """Return the display name of a value's kind, falling back to its type name."""
    kind = Kind.of(value)
    return kind.value if kind is not None else type(value).__name__


class Destination(abc.ABC, Generic[T]):
    """Abstract reference to caller-owned storage of one scalar kind."""

    @property
    @abc.abstractmethod
    def kind(self) -> Kind | None:
        """Kind of the referenced storage, or `None` if unrecognised."""

    @property
    @abc.abstractmethod
    def type_name(self) -> str:
        """Display name of the referenced storage's type."""

    @property
    @abc.abstractmethod
    def is_nil(self) -> bool:
        """Whether this reference points to nothing."""

    @abc.abstractmethod
    def get(self) -> T:
        """Read the referenced value."""

    @abc.abstractmethod
    def set(self, value: T) -> None:
        """Overwrite the referenced value."""


class Ref(Destination[T]):
    """A standalone mutable box holding one value.

    Attributes:
        value: The current value. Only meaningful when the reference is not nil.
    """

    def __init__(self, value: T, kind: Kind | None = None) -> None:
        """Initialize the box.

        Args:
            value: Initial value. Also used to infer the kind when `kind` is
                not given; an `int` infers `Kind.INT`.
            kind: Explicit kind, e.g. `Kind.UINT32` for a box holding `0`.
        """
        self.value = value
        self._kind = kind if kind is not None else Kind.of(value)
        self._type_name = kind.value if kind is not None else type_name_of(value)
        self._nil = False

    @classmethod
    def nil(cls, kind: Kind) -> Ref[Any]:
        """Create a nil reference of the given kind."""
        ref: Ref[Any] = cls(None, kind)
        ref._nil = True
        return ref

    @property
    def kind(self) -> Kind | None:
        """Kind of the box."""
        return self._kind

    @property
    def type_name(self) -> str:
        """Display name of the box's type."""
        return self._type_name

    @property
    def is_nil(self) -> bool:
        """Whether this is a nil reference."""
        return self._nil

    def get(self) -> T:
        """Return the boxed value."""
        return self.value

    def set(self, value: T) -> None:
        """Replace the boxed value."""
        if self._nil:
            raise ValueError(f"Cannot set through a nil {self._type_name} reference")
        self.value = value

    def __repr__(self) -> str:
        """Return a debug representation."""
        if self._nil:
            return f"Ref.nil({self._type_name})"
        return f"Ref({self.value!r}, {self._type_name})"


class AttrRef(Destination[Any]):
    """A reference to attribute `attr` of object `obj`.

    A nil reference is created by passing `None` as `obj`, in which case
    `kind` is required.
    """

    def __init__(self, obj: Any, attr: str, kind: Kind | None = None) -> None:
        """Initialize the reference.

        Args:
            obj: Object owning the attribute, or `None` for a nil reference.
            attr: Attribute name.
            kind: Explicit kind. When omitted it is inferred from the
                attribute's current value.
        """
        if obj is None and kind is None:
            raise ValueError("A nil AttrRef needs an explicit kind")
        self.obj = obj
        self.attr = attr
        if kind is not None:
            self._kind: Kind | None = kind
            self._type_name = kind.value
        else:
            current = getattr(obj, attr)
            self._kind = Kind.of(current)
            self._type_name = type_name_of(current)

    @property
    def kind(self) -> Kind | None:
        """Kind of the attribute."""
        return self._kind

    @property
    def type_name(self) -> str:
        """Display name of the attribute's type."""
        return self._type_name

    @property
    def is_nil(self) -> bool:
        """Whether this reference has no owning object."""
        return self.obj is None

    def get(self) -> Any:
        """Read the attribute."""
        return getattr(self.obj, self.attr)

    def set(self, value: Any) -> None:
        """Assign the attribute."""
        if self.obj is None:
            raise ValueError(f"Cannot set {self.attr!r} through a nil {self._type_name} reference")
        setattr(self.obj, self.attr, value)

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"AttrRef({type(self.obj).__name__}.{self.attr}, {self._type_name})"
