# qwfermi/utils/__init__.py
from __future__ import annotations
from .constants import Q, K_B, HBAR, M0, PI, FERMI_TOL_J
from .errors import DomainError, InfeasibleTargetError

__all__ = [
    "Q", "K_B", "HBAR", "M0", "PI", "FERMI_TOL_J",
    "DomainError", "InfeasibleTargetError",
]
