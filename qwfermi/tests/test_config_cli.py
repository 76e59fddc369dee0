# -*- coding: utf-8 -*-
"""
YAML run file → FermiRunSpec → workflow / CLI.
"""
import math

import pytest

from qwfermi.io.config import build_fermi_spec, load_config
from qwfermi.main import main
from qwfermi.utils.constants import Q, M0, FERMI_TOL_J
from qwfermi.workflows.run_fermi import run_from_config

RUN_YAML = """
fermi:
  T_K: 300
  m_rel: 0.067
  N_m2: 1.0e15
  subbands_eV: [0.05, 0.0]
"""


def test_build_spec_converts_units(tmp_path):
    cfg_path = tmp_path / "run.yaml"
    cfg_path.write_text(RUN_YAML)
    spec = build_fermi_spec(load_config(cfg_path))
    assert spec.T_K == 300.0
    assert math.isclose(spec.m_kg, 0.067 * M0, rel_tol=1e-15)
    assert spec.subbands_J == (0.0, 0.05 * Q)  # sorted ascending
    assert spec.tol_J == FERMI_TOL_J
    assert spec.max_iter is None


def test_optional_tolerance(tmp_path):
    cfg_path = tmp_path / "run.yaml"
    cfg_path.write_text(RUN_YAML + "  tol_ueV: 1.0\n  max_iter: 40\n")
    spec = build_fermi_spec(load_config(cfg_path))
    assert math.isclose(spec.tol_J, 1e-6 * Q, rel_tol=1e-12)
    assert spec.max_iter == 40


@pytest.mark.parametrize(
    "text",
    ["- just\n- a list\n", "mesh: {}\n", "fermi:\n  m_rel: 0.067\n  N_m2: 1e15\n"],
)
def test_invalid_config_raises(tmp_path, text):
    cfg_path = tmp_path / "bad.yaml"
    cfg_path.write_text(text)
    with pytest.raises(ValueError):
        load_config(cfg_path)


def test_run_from_config(tmp_path, capsys):
    cfg_path = tmp_path / "run.yaml"
    cfg_path.write_text(RUN_YAML)
    res = run_from_config(cfg_path)
    assert res.ok and res.converged
    assert "[run] E_F=" in capsys.readouterr().out


def test_cli_flags(capsys):
    rc = main(["fermi", "--T", "300", "--m-rel", "0.067", "--N", "1e15",
               "--subbands-eV", "0", "0.05"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "E_F = " in out
    assert "subband 1" in out


def test_cli_unreachable_target_exit_code(capsys):
    rc = main(["fermi", "--N", "1e20", "--subbands-eV", "0"])
    assert rc == 1
    assert "No quasi-Fermi energy in range" in capsys.readouterr().err


def test_cli_debug_prints_spec_and_bisection(capsys):
    rc = main(["fermi", "--subbands-eV", "0", "0.05", "--debug"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "DEBUG: [run] T=300 K" in out
    assert "[fermi] bisection start" in out


def test_cli_bad_temperature_exit_code(capsys):
    rc = main(["fermi", "--T", "0", "--subbands-eV", "0"])
    assert rc == 1
    assert "Temperature T must be > 0" in capsys.readouterr().err


def test_debug_is_per_call(capsys):
    main(["fermi", "--subbands-eV", "0", "--debug"])
    capsys.readouterr()
    main(["fermi", "--subbands-eV", "0"])
    assert "DEBUG:" not in capsys.readouterr().out
