# qwfermi/utils/constants.py
from __future__ import annotations

__all__ = ["Q", "K_B", "HBAR", "M0", "PI", "FERMI_TOL_J"]

# Fundamental constants (SI)
Q    = 1.602176634e-19       # elementary charge [C]
K_B  = 1.380649e-23          # Boltzmann constant [J/K]
HBAR = 1.054571817e-34       # reduced Planck constant [J·s]
M0   = 9.1093837015e-31      # electron rest mass [kg]
PI   = 3.141592653589793

# Bisection tolerance on the Fermi energy: 0.01 µeV [J]
FERMI_TOL_J = 1e-8 * Q
