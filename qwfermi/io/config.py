# qwfermi/io/config.py
# -*- coding: utf-8 -*-
"""
YAML → FermiRunSpec helpers.

Schema (minimal, example):

fermi:
  T_K: 300
  m_rel: 0.067              # DOS effective mass / m0
  N_m2: 1.0e15              # total sheet density
  subbands_eV: [0.0, 0.05]  # subband minima
  tol_ueV: 0.01             # optional, bisection tolerance
  max_iter: null            # optional, bisection cap
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import yaml

from qwfermi.utils.constants import Q, M0, FERMI_TOL_J

@dataclass
class RunConfig:
    raw: dict
    path: Path

@dataclass(frozen=True)
class FermiRunSpec:
    T_K: float
    m_kg: float
    N_m2: float
    subbands_J: Tuple[float, ...]
    tol_J: float = FERMI_TOL_J
    max_iter: Optional[int] = None

def load_config(path: Path) -> RunConfig:
    data = yaml.safe_load(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError("Top-level YAML must be a mapping")
    _validate_minimum(data)
    return RunConfig(raw=data, path=Path(path))

def build_fermi_spec(cfg: RunConfig) -> FermiRunSpec:
    f = cfg.raw["fermi"]
    T = float(f.get("T_K", 300.0))
    m_rel = float(f["m_rel"])
    N = float(f["N_m2"])

    subbands_eV = f.get("subbands_eV") or []
    if not subbands_eV:
        raise ValueError("fermi.subbands_eV is empty")
    subbands_J = tuple(sorted(float(e) * Q for e in subbands_eV))

    tol_ueV = f.get("tol_ueV")
    tol_J = float(tol_ueV) * 1e-6 * Q if tol_ueV is not None else FERMI_TOL_J
    max_iter = f.get("max_iter")

    return FermiRunSpec(
        T_K=T,
        m_kg=m_rel * M0,
        N_m2=N,
        subbands_J=subbands_J,
        tol_J=tol_J,
        max_iter=int(max_iter) if max_iter is not None else None,
    )

def _validate_minimum(cfg: dict) -> None:
    if "fermi" not in cfg or not isinstance(cfg["fermi"], dict):
        raise ValueError("Missing top-level key: fermi")
    for key in ("m_rel", "N_m2", "subbands_eV"):
        if key not in cfg["fermi"]:
            raise ValueError(f"Missing key: fermi.{key}")
