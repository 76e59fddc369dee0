# qwfermi/utils/errors.py
"""
Domain errors raised by the carrier-statistics core.

DomainError           : unphysical or malformed input (T <= 0, m <= 0, N <= 0, NaN, ...)
InfeasibleTargetError : requested sheet density not reachable inside the search bracket
"""
from __future__ import annotations

from typing import Tuple

from .constants import Q

__all__ = ["DomainError", "InfeasibleTargetError"]


class DomainError(ValueError):
    """Input outside the physical domain of a formula."""


class InfeasibleTargetError(DomainError):
    """
    No sign change of (population - target) across the bisection bracket.

    Attributes
    ----------
    bracket : (float, float)
        Search interval [E_lo, E_hi] in J.
    target : float
        Requested sheet density [1/m^2].
    """

    def __init__(self, bracket: Tuple[float, float], target: float) -> None:
        self.bracket = (float(bracket[0]), float(bracket[1]))
        self.target = float(target)
        lo_eV, hi_eV = self.bracket[0] / Q, self.bracket[1] / Q
        super().__init__(
            f"No quasi-Fermi energy in range: target N={self.target:.3e} m^-2 "
            f"not reachable in E_F∈[{lo_eV:+.6f},{hi_eV:+.6f}] eV."
        )

    def __reduce__(self):
        return (type(self), (self.bracket, self.target))
