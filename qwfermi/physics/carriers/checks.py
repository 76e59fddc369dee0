# qwfermi/physics/carriers/checks.py
"""
Input coercion and domain checks shared by the carrier-statistics modules.

All checks raise qwfermi.utils.errors.DomainError with the offending value.
"""
from __future__ import annotations

import numpy as np

from ...utils.errors import DomainError

__all__ = ["c64", "check_finite", "check_positive", "check_temperature"]


def c64(x) -> np.ndarray:
    """float64 array; scalars stay 0-d."""
    return np.asarray(x, dtype=np.float64)


def check_finite(name: str, x: np.ndarray) -> None:
    if not np.all(np.isfinite(x)):
        idx = np.where(~np.isfinite(np.atleast_1d(x)))[0][:5]
        raise DomainError(f"{name} has non-finite values at indices {idx.tolist()}.")


def check_positive(name: str, x: np.ndarray, unit: str = "") -> None:
    check_finite(name, x)
    if np.any(x <= 0.0):
        mn = float(np.min(x))
        raise DomainError(f"{name} must be > 0{(' ' + unit) if unit else ''} (got min {mn}).")


def check_temperature(T: np.ndarray) -> None:
    check_positive("Temperature T", T, unit="K")
