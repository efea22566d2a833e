"""
abi_params.config — strict-mode flag and validation caps.

Configuration precedence:
  1) Environment variables (ABI_PARAMS_*)
  2) Hardcoded defaults below

Key env vars (case-insensitive where boolean):
  - ABI_PARAMS_STRICT           (bool)  default: false
        Run the per-node width/length checks in every ParamType constructor.
  - ABI_PARAMS_MAX_DEPTH        (int)   default: 1024
        Deepest type tree accepted by validate_param_type.
  - ABI_PARAMS_MAX_FIXED_BYTES  (int)   default: 32
        Largest bytesN accepted by validate_param_type.

The type model itself does not depend on any of these values unless strict mode
is on; the defaults reproduce the unchecked behaviour.

Usage:
    from abi_params.config import load_config
    CFG = load_config()
    if CFG.strict_mode: ...

load_config() is cached; call load_config.cache_clear() after changing the
environment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict

log = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 1024
DEFAULT_MAX_FIXED_BYTES = 32


# ----------------------------- helpers ---------------------------------------


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    return val in ("1", "true", "t", "yes", "y", "on")


def _env_int(name: str, default: int, *, min_v: int, max_v: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        v = int(raw, 0)
    except ValueError:
        log.warning("ignoring %s=%r: not an integer, using %d", name, raw, default)
        return default
    if v < min_v:
        return min_v
    if v > max_v:
        return max_v
    return v


# ------------------------------- config --------------------------------------


@dataclass(frozen=True)
class ParamsConfig:
    strict_mode: bool
    max_depth: int
    max_fixed_bytes: int

    def as_dict(self) -> Dict[str, Any]:
        return {
            "strict_mode": self.strict_mode,
            "max_depth": self.max_depth,
            "max_fixed_bytes": self.max_fixed_bytes,
        }


@lru_cache(maxsize=1)
def load_config() -> ParamsConfig:
    """
    Build and cache a ParamsConfig from environment + defaults.
    """
    cfg = ParamsConfig(
        strict_mode=_env_bool("ABI_PARAMS_STRICT", False),
        max_depth=_env_int("ABI_PARAMS_MAX_DEPTH", DEFAULT_MAX_DEPTH, min_v=1, max_v=1_000_000),
        max_fixed_bytes=_env_int(
            "ABI_PARAMS_MAX_FIXED_BYTES", DEFAULT_MAX_FIXED_BYTES, min_v=0, max_v=65_535
        ),
    )
    if cfg.strict_mode:
        log.debug("abi_params strict mode enabled: %s", cfg.as_dict())
    return cfg


__all__ = ["ParamsConfig", "load_config", "DEFAULT_MAX_DEPTH", "DEFAULT_MAX_FIXED_BYTES"]
