# qwfermi/physics/carriers/fermi.py
"""
Fermi energy of a 2D electron gas from its total sheet density.

- SI units throughout.
- Single subband: analytic inverse of population(),

      E_F = E_min + k_B T ln( expm1( N π ħ^2 / (m* k_B T) ) ).

- Many subbands: bisection on  Σ_i n_i(E_F) - N = 0  inside
  [E_first - 100 k_B T, E_last + 100 k_B T].
    * Bracket validity is judged on the lowest subband alone (monotone proxy).
    * Each step keeps the half whose endpoint sign differs from the midpoint's.
    * Stops when the bracket is narrower than tol_J (default 0.01 µeV), with an
      iteration cap of ceil(log2(width/tol)) + 16.

Public API (stable):
    FermiSolveResult
    fermi_energy_single(E_min_J, m_kg, N_m2, T)             -> E_F [J]
    solve_fermi_global(m_kg, N_m2, T, subbands, ...)       -> FermiSolveResult
    fermi_energy_global(m_kg, N_m2, T, subbands, ...)      -> E_F [J]
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple, Union

import math
import numpy as np

from ...models.subband import Subband
from ...utils import diagnostics as diag
from ...utils import logger
from ...utils.constants import K_B, FERMI_TOL_J
from ...utils.errors import DomainError, InfeasibleTargetError
from .checks import c64, check_finite, check_positive, check_temperature
from .population import dos_2d, population, subband_populations

__all__ = [
    "FermiSolveResult",
    "fermi_energy_single",
    "solve_fermi_global",
    "fermi_energy_global",
]

# Half-width of the search window beyond the outermost subbands, in units of k_B T
BRACKET_MARGIN_KT = 100.0
_EXTRA_ITERS = 16

SubbandLike = Union[float, Subband]


@dataclass(slots=True)
class FermiSolveResult:
    ok: bool
    E_F_J: float                        # nan when ok is False
    bracket_J: Tuple[float, float]      # initial search interval
    target_m2: float
    iters: int
    converged: bool
    populations_m2: np.ndarray = field(default_factory=lambda: np.empty(0))
    residual_m2: float = float("nan")   # Σ n_i(E_F) - N
    error: Optional[InfeasibleTargetError] = None


# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------
def _ladder_energies(subbands: Sequence[SubbandLike], m_kg: float) -> np.ndarray:
    """Subband minima [J] as a float64 array; validates order and shared mass."""
    items = list(subbands)
    if not items:
        raise DomainError("subband ensemble is empty; need at least one subband")

    E = np.empty(len(items), dtype=np.float64)
    for i, sb in enumerate(items):
        if isinstance(sb, Subband):
            if sb.m_dos_kg is not None and not math.isclose(sb.m_dos_kg, m_kg, rel_tol=1e-12):
                raise DomainError(
                    f"subband #{i} ({sb.label or 'unlabelled'}) has m_dos={sb.m_dos_kg:.4e} kg, "
                    f"solver mass is {m_kg:.4e} kg; one shared DOS mass per solve"
                )
            E[i] = sb.E_min_J
        else:
            E[i] = float(sb)

    check_finite("subband minima", E)
    if np.any(np.diff(E) < 0.0):
        bad = int(np.where(np.diff(E) < 0.0)[0][0])
        raise DomainError(
            f"subband minima must be in ascending order (E[{bad}] > E[{bad + 1}])"
        )
    return E


def _default_max_iter(width_J: float, tol_J: float) -> int:
    return max(int(math.ceil(math.log2(width_J / tol_J))), 0) + _EXTRA_ITERS


def _check_scalars(m_kg: float, T: float) -> Tuple[float, float]:
    m = c64(m_kg)
    T = c64(T)
    if m.ndim or T.ndim:
        raise DomainError("m_kg and T must be scalars")
    check_positive("effective mass m", m, unit="kg")
    check_temperature(T)
    return float(m), float(T)


# ---------------------------------------------------------------------
# Single subband (analytic)
# ---------------------------------------------------------------------
def fermi_energy_single(E_min_J: float, m_kg: float, N_m2: float, T: float) -> float:
    """
    Quasi-Fermi energy [J] for one subband holding N carriers per m^2.

    Exact inverse of population(); carriers may occupy any energy above E_min.
    Raises DomainError for N <= 0 (the logarithm has no real value there).
    """
    m, T = _check_scalars(m_kg, T)
    E_min = float(E_min_J)
    N = float(N_m2)
    if not (math.isfinite(E_min) and math.isfinite(N)):
        raise DomainError(f"E_min and N must be finite (got E_min={E_min}, N={N})")
    if N <= 0.0:
        raise DomainError(f"sheet density N must be > 0 m^-2 for a Fermi level (got {N})")

    kT = K_B * T
    x = N / (float(dos_2d(m)) * kT)   # = N π ħ^2 / (m kT)
    if x == 0.0:
        raise DomainError(
            f"sheet density N={N:.3e} m^-2 underflows against rho*kT; no finite Fermi level"
        )
    if x > 1.0:
        # ln(e^x - 1) = x + ln(1 - e^-x); avoids exp overflow when degenerate
        log_em1 = x + math.log(-math.expm1(-x))
    else:
        log_em1 = math.log(math.expm1(x))
    return E_min + kT * log_em1


# ---------------------------------------------------------------------
# Many subbands (bisection)
# ---------------------------------------------------------------------
def solve_fermi_global(
    m_kg: float,
    N_m2: float,
    T: float,
    subbands: Sequence[SubbandLike],
    *,
    tol_J: float = FERMI_TOL_J,
    max_iter: Optional[int] = None,
    debug: bool = False,
) -> FermiSolveResult:
    """
    Global Fermi energy for a ladder of subbands sharing one DOS mass.

    Parameters
    ----------
    m_kg : float
        In-plane DOS effective mass [kg].
    N_m2 : float
        Total sheet density to accommodate [1/m^2].
    T : float
        Carrier temperature [K].
    subbands : sequence of float or Subband
        Subband minima [J], ascending.
    tol_J : float
        Bracket width at which bisection stops [J].
    max_iter : int, optional
        Hard cap on bisection steps; default ceil(log2(width/tol)) + 16.
    debug : bool
        Print one line per bisection step.

    Returns
    -------
    FermiSolveResult
        ok=False (with .error set) when N is not reachable inside the bracket.
        Input-domain problems (T <= 0, empty ladder, ...) still raise DomainError.
    """
    m, T = _check_scalars(m_kg, T)
    E = _ladder_energies(subbands, m)
    N = float(N_m2)
    if not math.isfinite(N):
        raise DomainError(f"target sheet density must be finite (got {N})")
    tol = float(tol_J)
    if not (math.isfinite(tol) and tol > 0.0):
        raise DomainError(f"tol_J must be > 0 (got {tol_J!r})")
    if max_iter is not None and int(max_iter) < 1:
        raise DomainError(f"max_iter must be >= 1 (got {max_iter!r})")

    kT = K_B * T
    E_lo = float(E[0] - BRACKET_MARGIN_KT * kT)
    E_hi = float(E[-1] + BRACKET_MARGIN_KT * kT)
    bracket = (E_lo, E_hi)

    sign_lo = np.sign(float(population(E[0], E_lo, m, T)) - N)
    sign_hi = np.sign(float(population(E[0], E_hi, m, T)) - N)
    if sign_lo == sign_hi:
        err = InfeasibleTargetError(bracket, N)
        if debug:
            logger.warn(str(err))
        return FermiSolveResult(
            ok=False, E_F_J=float("nan"), bracket_J=bracket, target_m2=N,
            iters=0, converged=False, error=err,
        )

    n_cap = _default_max_iter(E_hi - E_lo, tol) if max_iter is None else int(max_iter)
    if debug:
        diag.log_bisection_start(
            E_lo_J=E_lo, E_hi_J=E_hi, target_m2=N, subbands_J=E, max_iter=n_cap,
        )

    E_mid = 0.5 * (E_lo + E_hi)
    it = 0
    while abs(E_hi - E_lo) > tol and it < n_cap:
        resid = float(np.sum(subband_populations(E, E_mid, m, T))) - N
        if np.sign(resid) == sign_lo:
            E_lo = E_mid
        else:
            E_hi = E_mid
        it += 1
        if debug:
            diag.log_bisection_iter(it=it, E_mid_J=E_mid, width_J=E_hi - E_lo, resid_m2=resid)
        E_mid = 0.5 * (E_lo + E_hi)

    converged = abs(E_hi - E_lo) <= tol
    if not converged:
        logger.warn(
            f"Fermi bisection hit max_iter={n_cap} with bracket width "
            f"{abs(E_hi - E_lo):.3e} J > tol {tol:.3e} J; returning midpoint"
        )

    pops = subband_populations(E, E_mid, m, T)
    if debug:
        diag.log_bisection_summary(
            converged=converged, iters=it, E_F_J=E_mid, populations_m2=pops,
        )
    return FermiSolveResult(
        ok=True, E_F_J=float(E_mid), bracket_J=bracket, target_m2=N,
        iters=it, converged=converged, populations_m2=pops,
        residual_m2=float(np.sum(pops)) - N,
    )


def fermi_energy_global(
    m_kg: float,
    N_m2: float,
    T: float,
    subbands: Sequence[SubbandLike],
    *,
    tol_J: float = FERMI_TOL_J,
    max_iter: Optional[int] = None,
    debug: bool = False,
) -> float:
    """
    Global Fermi energy [J]; raises InfeasibleTargetError if N is out of reach.

    See solve_fermi_global() for parameters.
    """
    res = solve_fermi_global(
        m_kg, N_m2, T, subbands, tol_J=tol_J, max_iter=max_iter, debug=debug,
    )
    if not res.ok:
        raise res.error
    return res.E_F_J
