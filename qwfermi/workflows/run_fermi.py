# -*- coding: utf-8 -*-
"""
Single-run workflow wiring config → Fermi solve → log.
"""
from __future__ import annotations
from pathlib import Path

from qwfermi.io.config import FermiRunSpec, build_fermi_spec, load_config
from qwfermi.physics.carriers.fermi import FermiSolveResult, solve_fermi_global
from qwfermi.utils import logger
from qwfermi.utils.constants import Q

def run_spec(spec: FermiRunSpec, *, debug: bool = False) -> FermiSolveResult:
    if debug:
        logger.debug(
            f"[run] T={spec.T_K:g} K | m*={spec.m_kg:.4e} kg | N={spec.N_m2:.3e} m^-2 | "
            f"E_sub=[{', '.join(f'{E / Q:+.4f}' for E in spec.subbands_J)}] eV"
        )
    res = solve_fermi_global(
        spec.m_kg, spec.N_m2, spec.T_K, spec.subbands_J,
        tol_J=spec.tol_J, max_iter=spec.max_iter, debug=debug,
    )
    if res.ok:
        logger.info(
            f"[run] E_F={res.E_F_J / Q:+.6f} eV "
            f"(iters={res.iters}, converged={res.converged}, nsub={len(spec.subbands_J)})"
        )
    else:
        logger.error(f"[run] {res.error}")
    return res

def run_from_config(cfg_path: Path, *, debug: bool = False) -> FermiSolveResult:
    spec = build_fermi_spec(load_config(cfg_path))
    return run_spec(spec, debug=debug)
