# qwfermi/physics/carriers/occupation.py
"""
Fermi–Dirac occupation of extended states and of localized (dopant) levels.

- SI units throughout (energies in J, T in K).
- Vectorized over numpy arrays; scalars come back as 0-d float64 arrays.
- Overflow-free: exp() is only ever evaluated at -|x|, so no clipping is needed
  and f(E_F) is exactly 1/2 (or 1/(1 + 1/g) for a level of degeneracy g).

Public API (stable):
    occupation(E_F_J, E_J, T)                         -> f      in [0, 1]
    occupation_ionized(E_F_J, E_d_J, T, g_d=2.0)      -> f_d    in [0, 1]
    ionized_donor_density(E_d_J, E_F_J, T, N_d, g_d)  -> N_d^+  [1/m^3]
"""

from __future__ import annotations

import numpy as np

from ...utils.constants import K_B
from ...utils.errors import DomainError
from .checks import c64, check_finite, check_temperature

__all__ = [
    "occupation",
    "occupation_ionized",
    "ionized_donor_density",
]


def _reduced_energy(E_J, E_F_J, T) -> np.ndarray:
    """x = (E - E_F) / (k_B T), validated."""
    E = c64(E_J)
    mu = c64(E_F_J)
    T = c64(T)
    check_finite("E", E)
    check_finite("E_F", mu)
    check_temperature(T)
    return (E - mu) / (K_B * T)


def occupation(
    E_F_J: float | np.ndarray,
    E_J: float | np.ndarray,
    T: float | np.ndarray,
) -> np.ndarray:
    """
    Fermi–Dirac occupation probability of a state at energy E:

        f = 1 / (exp((E - E_F)/k_B T) + 1).

    Exactly 0.5 at E == E_F, strictly decreasing in E.
    """
    x = _reduced_energy(E_J, E_F_J, T)
    e = np.exp(-np.abs(x))
    return np.where(x >= 0.0, e / (1.0 + e), 1.0 / (1.0 + e))


def occupation_ionized(
    E_F_J: float | np.ndarray,
    E_d_J: float | np.ndarray,
    T: float | np.ndarray,
    g_d: float = 2.0,
) -> np.ndarray:
    """
    Occupation of a localized level of degeneracy g_d (default 2, spin-degenerate donor):

        f_d = 1 / (exp((E_d - E_F)/k_B T) / g_d + 1).

    At E_d == E_F this is g_d/(g_d + 1), i.e. 1/1.5 for g_d = 2 (not 0.5).
    """
    g = float(g_d)
    if not np.isfinite(g) or g <= 0.0:
        raise DomainError(f"degeneracy g_d must be > 0 (got {g_d!r})")
    x = _reduced_energy(E_d_J, E_F_J, T)
    e = np.exp(-np.abs(x))
    return np.where(x >= 0.0, e / (e + 1.0 / g), 1.0 / (e / g + 1.0))


def ionized_donor_density(
    E_d_J: float | np.ndarray,
    E_F_J: float | np.ndarray,
    T: float | np.ndarray,
    N_d: float | np.ndarray,
    g_d: float = 2.0,
) -> np.ndarray:
    """
    Ionized donor density N_d^+ = N_d * (1 - f_d) for a level E_d [1/m^3].
    """
    N_d = c64(N_d)
    check_finite("N_d", N_d)
    if np.any(N_d < 0.0):
        raise DomainError(f"N_d must be >= 0 (got min {float(np.min(N_d))}).")
    f_d = occupation_ionized(E_F_J, E_d_J, T, g_d=g_d)
    return N_d * (1.0 - f_d)
