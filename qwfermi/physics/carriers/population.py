# qwfermi/physics/carriers/population.py
"""
2D sheet statistics: population of parabolic subbands (Fermi–Dirac).

- SI units throughout.
- Vectorized over numpy arrays.
- Closed form (no quadrature): integrating f_FD over the constant 2D DOS

      rho = m* / (π ħ^2)              [1/(J·m^2)], spin degeneracy included

  gives, with y = (E_F - E_min) / (k_B T),

      n = rho * k_B T * ln(1 + e^y)   [1/m^2]

  ln(1 + e^y) is evaluated as max(y, 0) + log1p(e^{-|y|}), which is exact to
  rounding in both limits and cannot overflow:
    * y << 0 : n -> rho k_B T e^y          (non-degenerate / Boltzmann tail)
    * y >> 0 : n -> rho (E_F - E_min)      (fully degenerate)

Public API (stable):
    dos_2d(m_kg)
    population(E_min_J, E_F_J, m_kg, T)
    population_derivative(E_min_J, E_F_J, m_kg, T)
    subband_populations(E_sub_J, E_F_J, m_kg, T)
    total_population(E_sub_J, E_F_J, m_kg, T)
"""
from __future__ import annotations

import numpy as np

from ...utils.constants import K_B, HBAR, PI
from .checks import c64, check_finite, check_positive, check_temperature
from .occupation import occupation

__all__ = [
    "dos_2d",
    "population",
    "population_derivative",
    "subband_populations",
    "total_population",
]


# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------
def _softplus(y: np.ndarray) -> np.ndarray:
    """ln(1 + e^y) without overflow."""
    return np.maximum(y, 0.0) + np.log1p(np.exp(-np.abs(y)))


def _validate_population_inputs(E_min, E_F, m, T) -> None:
    check_finite("E_min", E_min)
    check_finite("E_F", E_F)
    check_positive("effective mass m", m, unit="kg")
    check_temperature(T)


def dos_2d(m_kg: float | np.ndarray) -> np.ndarray:
    """
    Constant 2D density of states rho = m*/(π ħ^2) [1/(J·m^2)].
    """
    m = c64(m_kg)
    check_positive("effective mass m", m, unit="kg")
    return m / (PI * HBAR * HBAR)


# ---------------------------------------------------------------------
# Single subband
# ---------------------------------------------------------------------
def population(
    E_min_J: float | np.ndarray,
    E_F_J: float | np.ndarray,
    m_kg: float | np.ndarray,
    T: float | np.ndarray,
) -> np.ndarray:
    """
    Sheet population of a subband with minimum E_min at Fermi energy E_F [1/m^2].

    Non-negative and strictly increasing in E_F.
    """
    E_min = c64(E_min_J)
    E_F = c64(E_F_J)
    m = c64(m_kg)
    T = c64(T)
    _validate_population_inputs(E_min, E_F, m, T)

    kT = K_B * T
    y = (E_F - E_min) / kT
    return dos_2d(m) * kT * _softplus(y)


def population_derivative(
    E_min_J: float | np.ndarray,
    E_F_J: float | np.ndarray,
    m_kg: float | np.ndarray,
    T: float | np.ndarray,
) -> np.ndarray:
    """
    d n / d E_F = rho * f_FD(E_min; E_F) [1/(J·m^2)].

    Tends to rho in the degenerate limit; always > 0 for finite inputs.
    """
    m = c64(m_kg)
    check_positive("effective mass m", m, unit="kg")
    return dos_2d(m) * occupation(E_F_J, E_min_J, T)


# ---------------------------------------------------------------------
# Subband ladders
# ---------------------------------------------------------------------
def subband_populations(
    E_sub_J: np.ndarray,
    E_F_J: float,
    m_kg: float,
    T: float,
) -> np.ndarray:
    """
    Per-subband populations for one shared E_F [1/m^2], shape (n_sub,).
    """
    E_sub = np.atleast_1d(c64(E_sub_J))
    return np.ascontiguousarray(population(E_sub, E_F_J, m_kg, T))


def total_population(
    E_sub_J: np.ndarray,
    E_F_J: float,
    m_kg: float,
    T: float,
) -> float:
    """Sum of subband populations at E_F [1/m^2]."""
    return float(np.sum(subband_populations(E_sub_J, E_F_J, m_kg, T)))
