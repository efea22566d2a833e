"""
Encoding-layout classification of parameter types.

- is_dynamic(t): True when a value of ``t`` needs an offset ("head/tail")
  layout because its encoded size is not fixed by the type alone.
- is_empty_bytes_valid_encoding(t): True when the zero-length payload ``0x``
  is by itself a valid encoding of ``t``.

Both are pure functions; is_dynamic walks the tree with an explicit stack.
"""

from __future__ import annotations

from typing import List

from .types import Array, Bytes, FixedArray, FixedBytes, ParamType, String, Tuple

__all__ = ["is_dynamic", "is_empty_bytes_valid_encoding"]


def is_dynamic(t: ParamType) -> bool:
    """
    Return whether ``t`` is a dynamic type.

    bytes, string and T[] are always dynamic; T[k] is dynamic iff T is;
    a tuple is dynamic iff any of its fields is (so ``()`` is static).
    Every other type is static.
    """
    stack: List[ParamType] = [t]
    while stack:
        node = stack.pop()
        if isinstance(node, (Bytes, String, Array)):
            return True
        if isinstance(node, FixedArray):
            stack.append(node.element)
        elif isinstance(node, Tuple):
            stack.extend(node.fields)
    return False


def is_empty_bytes_valid_encoding(t: ParamType) -> bool:
    """
    Return whether a zero-length byte slice is a valid encoded form of ``t``.

    Only bytes0 and T[0] qualify. Dynamic types always carry at least a
    length word, and ``()`` is not accepted either.
    """
    if isinstance(t, (FixedBytes, FixedArray)):
        return t.length == 0
    return False
