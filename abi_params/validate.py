"""
abi_params.validate — opt-in well-formedness checks for parameter types.

The type model accepts any width or length. Parsers and programmatic builders
that want the usual ABI limits enforced call:

validate_param_type(t, *, max_depth=None, max_fixed_bytes=None) -> ParamType
    Walks the tree and raises ParamTypeError for the first problem found:
      * uintN / intN with N not a multiple of 8 in 8..256   (invalid_width)
      * negative or non-integer lengths; bytesN over the cap (invalid_length)
      * children that are not ParamType instances           (invalid_child)
      * nesting deeper than the cap                          (too_deep)
    Returns ``t`` unchanged on success.

check_node(t) runs the per-node part only; strict-mode constructors use it.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from .config import load_config
from .errors import INVALID_CHILD, INVALID_LENGTH, INVALID_WIDTH, TOO_DEEP, ParamTypeError
from .types import Array, FixedArray, FixedBytes, Int, ParamType, Tuple, Uint, children

log = logging.getLogger(__name__)

__all__ = ["VALID_WIDTHS", "check_node", "validate_param_type", "is_valid_param_type"]

VALID_WIDTHS = frozenset(range(8, 257, 8))


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _reject(message: str, code: str, **context: Any) -> ParamTypeError:
    log.debug("rejecting param type: %s", message, extra={"code": code})
    return ParamTypeError(message, code=code, context=context)


def check_node(t: ParamType, *, max_fixed_bytes: Optional[int] = None) -> None:
    """Check the node's own width/length and the kind of its direct children."""
    if max_fixed_bytes is None:
        max_fixed_bytes = load_config().max_fixed_bytes

    if isinstance(t, (Uint, Int)):
        kind = "uint" if isinstance(t, Uint) else "int"
        if not _is_int(t.width) or t.width not in VALID_WIDTHS:
            raise _reject(
                f"{kind}{t.width}: width must be a multiple of 8 in 8..256",
                INVALID_WIDTH,
                width=t.width,
            )
    elif isinstance(t, FixedBytes):
        if not _is_int(t.length) or t.length < 0:
            raise _reject(
                f"bytes{t.length}: length must be a non-negative integer",
                INVALID_LENGTH,
                length=t.length,
            )
        if t.length > max_fixed_bytes:
            raise _reject(
                f"bytes{t.length}: length exceeds {max_fixed_bytes}",
                INVALID_LENGTH,
                length=t.length,
                max_fixed_bytes=max_fixed_bytes,
            )
    elif isinstance(t, FixedArray):
        if not _is_int(t.length) or t.length < 0:
            raise _reject(
                f"fixed array length must be a non-negative integer, got {t.length!r}",
                INVALID_LENGTH,
                length=t.length,
            )

    if isinstance(t, (FixedArray, Array, Tuple)):
        for i, child in enumerate(children(t)):
            if not isinstance(child, ParamType):
                raise _reject(
                    f"{type(t).__name__} child #{i} is not a ParamType: {child!r}",
                    INVALID_CHILD,
                    index=i,
                )


def validate_param_type(
    t: ParamType,
    *,
    max_depth: Optional[int] = None,
    max_fixed_bytes: Optional[int] = None,
) -> ParamType:
    """Validate the whole tree rooted at ``t``; see module docstring."""
    cfg = load_config()
    if max_depth is None:
        max_depth = cfg.max_depth
    if max_fixed_bytes is None:
        max_fixed_bytes = cfg.max_fixed_bytes

    if not isinstance(t, ParamType):
        raise _reject(f"not a ParamType: {t!r}", INVALID_CHILD)

    stack: List[tuple] = [(t, 1)]
    while stack:
        node, d = stack.pop()
        if d > max_depth:
            raise _reject(
                f"type nesting exceeds max depth {max_depth}",
                TOO_DEEP,
                max_depth=max_depth,
            )
        check_node(node, max_fixed_bytes=max_fixed_bytes)
        for child in children(node):
            stack.append((child, d + 1))
    return t


def is_valid_param_type(t: Any, **limits: Any) -> bool:
    try:
        validate_param_type(t, **limits)
        return True
    except ParamTypeError:
        return False
