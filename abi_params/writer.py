"""
Canonical signatures for parameter types.

The canonical signature is the single textual form of a type: it is what a
selector hash is computed over and what ``str(t)`` prints.

    address  bool  bytes  string  bytesN  uintN  intN
    T[]      T[k]  (T1,...,Tk)

Separators are a bare comma at every nesting level, with no whitespace.
"""

from __future__ import annotations

import re
from typing import Iterable, List

from .errors import ParamTypeError
from .types import (
    Address,
    Array,
    Bool,
    Bytes,
    FixedArray,
    FixedBytes,
    Int,
    ParamType,
    String,
    Tuple,
    Uint,
)

__all__ = ["canonical_signature", "params_signature", "function_signature"]

_NAME_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


def _write_leaf(t: ParamType) -> str:
    if isinstance(t, Address):
        return "address"
    if isinstance(t, Bool):
        return "bool"
    if isinstance(t, Bytes):
        return "bytes"
    if isinstance(t, String):
        return "string"
    if isinstance(t, FixedBytes):
        return f"bytes{t.length}"
    if isinstance(t, Uint):
        return f"uint{t.width}"
    if isinstance(t, Int):
        return f"int{t.width}"
    raise TypeError(f"not a ParamType: {t!r}")


def canonical_signature(t: ParamType) -> str:
    """
    Return the canonical signature of ``t``.

    Composite nodes are visited twice: once to schedule their children and
    once, after every child has been written, to assemble the result.
    """
    out: List[str] = []
    work = [(t, False)]
    while work:
        node, assembled = work.pop()
        if isinstance(node, Tuple):
            if assembled:
                k = len(node.fields)
                parts = out[len(out) - k :] if k else []
                if k:
                    del out[len(out) - k :]
                out.append("(" + ",".join(parts) + ")")
            else:
                work.append((node, True))
                work.extend((f, False) for f in reversed(node.fields))
        elif isinstance(node, Array):
            if assembled:
                out.append(out.pop() + "[]")
            else:
                work.append((node, True))
                work.append((node.element, False))
        elif isinstance(node, FixedArray):
            if assembled:
                out.append(f"{out.pop()}[{node.length}]")
            else:
                work.append((node, True))
                work.append((node.element, False))
        else:
            out.append(_write_leaf(node))
    return out.pop()


def params_signature(params: Iterable[ParamType]) -> str:
    """Signature of a parameter list, e.g. ``(address,uint256)``."""
    return canonical_signature(Tuple(tuple(params)))


def function_signature(name: str, params: Iterable[ParamType]) -> str:
    """
    Signature of a function or event, e.g. ``transfer(address,uint256)``.

    This is the exact text a selector or topic hash is computed over.
    """
    if not isinstance(name, str) or not _NAME_RE.fullmatch(name):
        raise ParamTypeError(
            f"invalid function/event name: {name!r}",
            code="invalid_name",
            context={"name": name},
        )
    return name + params_signature(params)
