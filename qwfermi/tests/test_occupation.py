# -*- coding: utf-8 -*-
"""
Fermi–Dirac occupation: half filling at E_F, degeneracy-2 donor level at 2/3,
monotone in E, no overflow far from E_F.
"""
import math

import numpy as np
import pytest

from qwfermi.physics.carriers.occupation import (
    occupation,
    occupation_ionized,
    ionized_donor_density,
)
from qwfermi.utils.constants import Q, K_B
from qwfermi.utils.errors import DomainError


@pytest.mark.parametrize("T", [0.1, 4.2, 77.0, 300.0, 1500.0])
def test_half_filling_at_fermi_level(T):
    E_F = 0.123 * Q
    assert float(occupation(E_F, E_F, T)) == 0.5


@pytest.mark.parametrize("T", [4.2, 300.0])
def test_ionized_level_at_fermi_level(T):
    E_F = -0.01 * Q
    assert math.isclose(float(occupation_ionized(E_F, E_F, T)), 1.0 / 1.5, rel_tol=1e-15)


def test_ionized_matches_closed_form():
    T = 300.0
    E_F = 0.0
    E_d = np.linspace(-0.2, 0.2, 41) * Q
    ref = 1.0 / (0.5 * np.exp((E_d - E_F) / (K_B * T)) + 1.0)
    assert np.allclose(occupation_ionized(E_F, E_d, T), ref, rtol=1e-13, atol=0.0)


def test_occupation_strictly_decreasing():
    T = 300.0
    E = np.linspace(-0.5, 0.5, 401) * Q
    f = occupation(0.0, E, T)
    assert np.all(np.diff(f) < 0.0)
    assert np.all((f > 0.0) & (f < 1.0))


def test_occupation_limits_without_overflow():
    T = 1.0  # |E - E_F|/kT ~ 1e4: naive exp() would overflow
    with np.errstate(over="raise"):
        f_hi = float(occupation(0.0, 1.0 * Q, T))
        f_lo = float(occupation(0.0, -1.0 * Q, T))
    assert f_hi == 0.0
    assert f_lo == 1.0


def test_occupation_symmetry():
    T = 77.0
    dE = np.linspace(0.0, 0.05, 11) * Q
    assert np.allclose(occupation(0.0, dE, T) + occupation(0.0, -dE, T), 1.0, rtol=0, atol=1e-15)


def test_ionized_donor_density_bounds():
    N_d = 1e24
    E_d = -0.006 * Q
    deep = float(ionized_donor_density(E_d, -0.3 * Q, 300.0, N_d))   # E_F far below E_d
    frozen = float(ionized_donor_density(E_d, 0.3 * Q, 300.0, N_d))  # E_F far above E_d
    assert math.isclose(deep, N_d, rel_tol=1e-4)
    assert frozen < 1e-3 * N_d


@pytest.mark.parametrize("T", [0.0, -300.0, float("nan")])
def test_rejects_bad_temperature(T):
    with pytest.raises(DomainError):
        occupation(0.0, 0.0, T)
    with pytest.raises(DomainError):
        occupation_ionized(0.0, 0.0, T)


def test_scalar_inputs_give_0d_results():
    f = occupation(0.0, 0.0, 300.0)
    assert f.ndim == 0
    assert np.ndim(occupation_ionized(0.0, 0.0, 300.0)) == 0
    n_plus = ionized_donor_density(-0.006 * Q, 0.0, 300.0, 1e24)
    assert np.ndim(n_plus) == 0
    assert isinstance(float(n_plus), float)
