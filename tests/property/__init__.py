"""
tests.property package bootstrap.

Shared configuration for property-based tests (Hypothesis):

- Registers named Hypothesis profiles (dev/ci/fast) and selects one using
  HYPOTHESIS_PROFILE, otherwise "ci" on CI (CI env var truthy) and "dev" locally.
- Provides ``param_types()``, a recursive strategy over the whole ParamType
  variant set with valid widths and small lengths.

Usage in tests:
    from tests.property import given, param_types

    @given(param_types())
    def test_something(t):
        ...
"""
from __future__ import annotations

import os
from typing import Final

from hypothesis import HealthCheck, Verbosity, given, settings
from hypothesis import strategies as st

from abi_params import (
    Address,
    Array,
    Bool,
    Bytes,
    FixedArray,
    FixedBytes,
    Int,
    String,
    Tuple,
    Uint,
)
from abi_params.validate import VALID_WIDTHS

# ---- profile registry --------------------------------------------------------

# The autouse config-reset fixture in tests/conftest.py is function scoped; it
# only clears a cache, so sharing it across generated examples is fine.
_SUPPRESSED = (HealthCheck.too_slow, HealthCheck.function_scoped_fixture)

settings.register_profile(
    "dev",
    settings(
        max_examples=100,
        deadline=None,
        suppress_health_check=_SUPPRESSED,
        verbosity=Verbosity.normal,
    ),
)

settings.register_profile(
    "ci",
    settings(
        max_examples=300,
        deadline=None,
        suppress_health_check=_SUPPRESSED,
        verbosity=Verbosity.verbose,
        derandomize=True,
    ),
)

settings.register_profile(
    "fast",
    settings(max_examples=25, deadline=None, suppress_health_check=_SUPPRESSED),
)


def _env_truthy(name: str) -> bool:
    v = os.getenv(name)
    return (v or "").lower() not in ("", "0", "false", "no", "off")


_active: Final[str] = os.getenv("HYPOTHESIS_PROFILE") or ("ci" if _env_truthy("CI") else "dev")
settings.load_profile(_active)


# ---- strategies --------------------------------------------------------------

_widths = st.sampled_from(sorted(VALID_WIDTHS))


def leaf_types():
    return st.one_of(
        _widths.map(Uint),
        _widths.map(Int),
        st.just(Address()),
        st.just(Bool()),
        st.just(Bytes()),
        st.just(String()),
        st.integers(min_value=0, max_value=32).map(FixedBytes),
    )


def param_types(max_leaves: int = 12):
    """Arbitrary finite ParamType trees."""
    return st.recursive(
        leaf_types(),
        lambda inner: st.one_of(
            inner.map(Array),
            st.builds(FixedArray, inner, st.integers(min_value=0, max_value=4)),
            st.lists(inner, max_size=4).map(Tuple),
        ),
        max_leaves=max_leaves,
    )


__all__ = ["st", "given", "leaf_types", "param_types", "active_profile"]


def active_profile() -> str:
    """Return the name of the active Hypothesis profile."""
    return _active
