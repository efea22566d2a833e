"""
ABI parameter types for contract functions and events.

The variant set is closed:

  elementary        Uint(width), Int(width), Address, Bool, FixedBytes(length)
  fixed-size        FixedArray(element, length)
  variable-size     Bytes, String, Array(element), Tuple(fields)

Values are immutable and compared structurally. Equality, hashing and the
display form (``str(t)``) never recurse on the Python stack, so trees of any
nesting depth are safe to compare and print.

Construction performs no range checks on widths or lengths unless strict mode
is enabled (see abi_params.config); abi_params.validate offers the same checks
on demand.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Sequence

__all__ = [
    "ParamType",
    "Uint",
    "Int",
    "Address",
    "Bool",
    "FixedBytes",
    "FixedArray",
    "Bytes",
    "String",
    "Array",
    "Tuple",
    "ELEMENTARY_TYPES",
    "children",
    "walk",
    "depth",
]


class ParamType:
    """Base of the closed set of function and event parameter types."""

    __slots__ = ()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ParamType):
            return NotImplemented
        return _structurally_equal(self, other)

    def __hash__(self) -> int:
        return hash(self.signature)

    def __str__(self) -> str:
        return self.signature

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.signature}>"

    @property
    def signature(self) -> str:
        """Canonical signature, e.g. ``(uint256[],bool)[3]``."""
        from .writer import canonical_signature

        return canonical_signature(self)

    def is_dynamic(self) -> bool:
        from .classify import is_dynamic

        return is_dynamic(self)

    def is_empty_bytes_valid_encoding(self) -> bool:
        from .classify import is_empty_bytes_valid_encoding

        return is_empty_bytes_valid_encoding(self)

    def _strict_check(self) -> None:
        from .config import load_config

        if load_config().strict_mode:
            from .validate import check_node

            check_node(self)


# ──────────────────────────────────────────────────────────────────────────────
# Elementary types
# ──────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, eq=False, repr=False)
class Uint(ParamType):
    """Unsigned integer of ``width`` bits."""

    width: int

    def __post_init__(self) -> None:
        self._strict_check()


@dataclass(frozen=True, eq=False, repr=False)
class Int(ParamType):
    """Two's complement signed integer of ``width`` bits."""

    width: int

    def __post_init__(self) -> None:
        self._strict_check()


@dataclass(frozen=True, eq=False, repr=False)
class Address(ParamType):
    pass


@dataclass(frozen=True, eq=False, repr=False)
class Bool(ParamType):
    pass


@dataclass(frozen=True, eq=False, repr=False)
class FixedBytes(ParamType):
    """Byte vector of exactly ``length`` bytes."""

    length: int

    def __post_init__(self) -> None:
        self._strict_check()


# ──────────────────────────────────────────────────────────────────────────────
# Fixed-size arrays
# ──────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, eq=False, repr=False)
class FixedArray(ParamType):
    """Array of exactly ``length`` values of type ``element``."""

    element: ParamType
    length: int

    def __post_init__(self) -> None:
        self._strict_check()


# ──────────────────────────────────────────────────────────────────────────────
# Variable-size types
# ──────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, eq=False, repr=False)
class Bytes(ParamType):
    pass


@dataclass(frozen=True, eq=False, repr=False)
class String(ParamType):
    """UTF-8 text."""


@dataclass(frozen=True, eq=False, repr=False)
class Array(ParamType):
    """Array of unknown size."""

    element: ParamType

    def __post_init__(self) -> None:
        self._strict_check()


@dataclass(frozen=True, eq=False, repr=False)
class Tuple(ParamType):
    """Ordered sequence of field types; position determines layout."""

    fields: Sequence[ParamType] = ()

    def __post_init__(self) -> None:
        # Freeze whatever sequence the caller handed us.
        object.__setattr__(self, "fields", tuple(self.fields))
        self._strict_check()


ELEMENTARY_TYPES = (Uint, Int, Address, Bool, FixedBytes)


# ──────────────────────────────────────────────────────────────────────────────
# Traversal helpers
# ──────────────────────────────────────────────────────────────────────────────


def children(t: ParamType) -> Sequence[ParamType]:
    """Direct child types of ``t`` in layout order."""
    if isinstance(t, (FixedArray, Array)):
        return (t.element,)
    if isinstance(t, Tuple):
        return t.fields
    return ()


def _own_params(t: ParamType) -> Any:
    """The non-child payload of a node: width, length, field count or None."""
    if isinstance(t, (Uint, Int)):
        return t.width
    if isinstance(t, (FixedBytes, FixedArray)):
        return t.length
    if isinstance(t, Tuple):
        return len(t.fields)
    return None


def walk(t: ParamType) -> Iterator[ParamType]:
    """Yield ``t`` and all of its descendants in pre-order."""
    stack: List[ParamType] = [t]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(children(node)))


def depth(t: ParamType) -> int:
    """Nesting depth; elementary and other leaf types have depth 1."""
    best = 0
    stack = [(t, 1)]
    while stack:
        node, d = stack.pop()
        if d > best:
            best = d
        for child in children(node):
            stack.append((child, d + 1))
    return best


def _structurally_equal(a: ParamType, b: ParamType) -> bool:
    stack = [(a, b)]
    while stack:
        x, y = stack.pop()
        if x is y:
            continue
        if type(x) is not type(y):
            return False
        if _own_params(x) != _own_params(y):
            return False
        stack.extend(zip(children(x), children(y)))
    return True
