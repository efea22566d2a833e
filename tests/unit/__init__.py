"""
tests.unit
==========

Shared sample types for the unit-test modules:

    from tests.unit import SAMPLES, deep_array

SAMPLES rows are (type, canonical signature, is_dynamic).
"""

from __future__ import annotations

from typing import List, Optional, Tuple as Row

from abi_params import (
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

__all__ = ["SAMPLES", "NESTED", "deep_array"]

# ((uint256[],bool)[3],string)
NESTED: ParamType = Tuple(
    [
        FixedArray(Tuple([Array(Uint(256)), Bool()]), 3),
        String(),
    ]
)

SAMPLES: List[Row[ParamType, str, bool]] = [
    (Address(), "address", False),
    (Bytes(), "bytes", True),
    (FixedBytes(32), "bytes32", False),
    (Uint(256), "uint256", False),
    (Int(64), "int64", False),
    (Bool(), "bool", False),
    (String(), "string", True),
    (Array(Bool()), "bool[]", True),
    (FixedArray(Uint(256), 2), "uint256[2]", False),
    (FixedArray(String(), 2), "string[2]", True),
    (FixedArray(Array(Bool()), 2), "bool[][2]", True),
    (Tuple([Bool(), Uint(256)]), "(bool,uint256)", False),
    (Tuple([Bool(), String()]), "(bool,string)", True),
    (Tuple([]), "()", False),
    (NESTED, "((uint256[],bool)[3],string)", True),
]


def deep_array(levels: int, leaf: Optional[ParamType] = None) -> ParamType:
    """``leaf[]`` nested ``levels`` times, built without recursion."""
    t = leaf if leaf is not None else Bool()
    for _ in range(levels):
        t = Array(t)
    return t
