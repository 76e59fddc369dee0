# qwfermi/__init__.py
"""
Fermi energy of a two-dimensional electron gas over quantized subbands.
"""
from __future__ import annotations

from .physics.carriers.occupation import occupation, occupation_ionized
from .physics.carriers.population import population
from .physics.carriers.fermi import (
    FermiSolveResult,
    fermi_energy_single,
    fermi_energy_global,
    solve_fermi_global,
)
from .utils.errors import DomainError, InfeasibleTargetError

__version__ = "0.1.0"

__all__ = [
    "occupation",
    "occupation_ionized",
    "population",
    "fermi_energy_single",
    "fermi_energy_global",
    "solve_fermi_global",
    "FermiSolveResult",
    "DomainError",
    "InfeasibleTargetError",
]
