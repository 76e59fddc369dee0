# -*- coding: utf-8 -*-
"""
Subband dataclass for one quantized level of a heterostructure.

Fields:
  - E_min_J:  subband minimum on the absolute energy scale [J]
  - m_dos_kg: in-plane density-of-states effective mass [kg] (optional;
              solvers take the shared mass per call)
  - label:    free-form tag, e.g. "e1"
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from qwfermi.utils.constants import Q, M0

@dataclass(frozen=True)
class Subband:
    E_min_J: float
    m_dos_kg: Optional[float] = None
    label: str = ""

    @classmethod
    def from_eV(cls, E_min_eV: float, m_rel: Optional[float] = None, label: str = "") -> "Subband":
        m = None if m_rel is None else float(m_rel) * M0
        return cls(E_min_J=float(E_min_eV) * Q, m_dos_kg=m, label=label)
