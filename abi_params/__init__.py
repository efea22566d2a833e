"""
abi_params — contract ABI parameter types, classification and canonical signatures.

This package exposes a small, stable surface:

- ParamType and its variants
    Uint(width), Int(width), Address(), Bool(), FixedBytes(length),
    FixedArray(element, length), Bytes(), String(), Array(element), Tuple(fields)
- is_dynamic(t) -> bool
    Whether values of ``t`` need offset-based (head/tail) encoding.
- is_empty_bytes_valid_encoding(t) -> bool
    Whether ``0x`` alone is a valid encoding of ``t``.
- canonical_signature(t) -> str
    The canonical text of ``t``; also what ``str(t)`` returns.
- params_signature(params) / function_signature(name, params) -> str
    Signatures of parameter lists, functions and events.
- validate_param_type(t, ...) -> ParamType
    Opt-in width/length/depth checks.

Parsing type strings, value encoding and selector hashing live elsewhere.
"""

from __future__ import annotations

from .classify import is_dynamic, is_empty_bytes_valid_encoding
from .config import ParamsConfig, load_config
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
    depth,
    walk,
)
from .validate import is_valid_param_type, validate_param_type
from .version import __version__
from .writer import canonical_signature, function_signature, params_signature


def version() -> str:
    """Return the abi_params semantic version string."""
    return __version__


__all__ = [
    "__version__",
    "version",
    # types
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
    "walk",
    "depth",
    # classification
    "is_dynamic",
    "is_empty_bytes_valid_encoding",
    # signatures
    "canonical_signature",
    "params_signature",
    "function_signature",
    # validation / config
    "ParamTypeError",
    "validate_param_type",
    "is_valid_param_type",
    "ParamsConfig",
    "load_config",
]
