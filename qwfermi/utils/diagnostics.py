"""
qwfermi/utils/diagnostics.py

Compact one-line prints for the Fermi-level bisection.
Called from physics/carriers/fermi.py when debug=True.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .constants import Q


def _fmt_range(x: np.ndarray, name: str) -> str:
    if x.size == 0:
        return f"{name}: (empty)"
    return f"{name}∈[{np.min(x):+.3e},{np.max(x):+.3e}]"


def log_bisection_start(
    *,
    E_lo_J: float,
    E_hi_J: float,
    target_m2: float,
    subbands_J: np.ndarray,
    max_iter: int,
    prefix: str = "[fermi]",
) -> None:
    print(
        f"{prefix} bisection start | E∈[{E_lo_J / Q:+.6f},{E_hi_J / Q:+.6f}] eV | "
        f"N={target_m2:.3e} m^-2 | nsub={subbands_J.size} "
        f"({_fmt_range(subbands_J / Q, 'E_sub/eV')}) | max_iter={max_iter}"
    )


def log_bisection_iter(
    *,
    it: int,
    E_mid_J: float,
    width_J: float,
    resid_m2: float,
    prefix: str = "[fermi]",
) -> None:
    print(
        f"{prefix} iter {it:03d} | E_mid={E_mid_J / Q:+.9f} eV | "
        f"width={width_J / Q:.3e} eV | ΣN-N={resid_m2:+.3e} m^-2"
    )


def log_bisection_summary(
    *,
    converged: bool,
    iters: int,
    E_F_J: float,
    populations_m2: Sequence[float],
    prefix: str = "[fermi]",
) -> None:
    pops = ", ".join(f"{p:.3e}" for p in populations_m2)
    print(
        f"{prefix} done | converged={converged} | iters={iters} | "
        f"E_F={E_F_J / Q:+.9f} eV | N_i=[{pops}] m^-2"
    )
