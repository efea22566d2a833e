"""abi_params.version — semantic version string.

Resolution order (first match wins):
- ABI_PARAMS_VERSION env var (exact value)
- installed package metadata for the 'abi-params' distribution
- BASE_VERSION + '+dev'
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import metadata as importlib_metadata
from typing import Optional

# Bump whenever canonical signatures or classification results change.
BASE_VERSION = "0.1.0"

DIST_NAME = "abi-params"


def _pkg_metadata_version(dist_name: str = DIST_NAME) -> Optional[str]:
    """Try to read installed package version; None if unavailable."""
    try:
        v = importlib_metadata.version(dist_name)
        return v if v and v != "0.0.0" else None
    except importlib_metadata.PackageNotFoundError:
        return None


@lru_cache(maxsize=1)
def compute_version() -> str:
    val = os.getenv("ABI_PARAMS_VERSION")
    if val:
        return val

    meta_v = _pkg_metadata_version()
    if meta_v:
        return meta_v

    return f"{BASE_VERSION}+dev"


__version__ = compute_version()

__all__ = ["__version__", "BASE_VERSION", "compute_version"]
