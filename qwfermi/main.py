# qwfermi/main.py
"""
qwfermi main entrypoint.

Default subcommand: fermi
Usage examples:
    python -m qwfermi
    python -m qwfermi fermi --help
    python -m qwfermi fermi --T 300 --m-rel 0.067 --N 1e15 --subbands-eV 0 0.05
    python -m qwfermi fermi --config run.yaml --debug
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence
import argparse
import sys

from .io.config import FermiRunSpec, build_fermi_spec, load_config
from .utils import logger
from .utils.constants import Q, M0, FERMI_TOL_J
from .utils.errors import DomainError
from .workflows.run_fermi import run_spec

__all__ = ["main"]


# ----------------------------- fermi subcommand ------------------------------


@dataclass(slots=True)
class _FermiArgs:
    config: Optional[Path]
    T_K: float
    m_rel: float
    N_m2: float
    subbands_eV: Sequence[float]
    tol_ueV: float
    debug: bool


def _add_fermi_subparser(
    subparsers: argparse._SubParsersAction,
) -> argparse.ArgumentParser:
    p = subparsers.add_parser(
        "fermi", help="Global Fermi energy of a multi-subband 2DEG"
    )
    p.add_argument("--config", type=Path, default=None, help="YAML run file (overrides flags)")
    p.add_argument("--T", type=float, default=300.0, help="Temperature [K]")
    p.add_argument(
        "--m-rel", type=float, default=0.067, help="DOS effective mass / m0 (GaAs ~0.067)"
    )
    p.add_argument("--N", type=float, default=1e15, help="Total sheet density [1/m^2]")
    p.add_argument(
        "--subbands-eV", type=float, nargs="+", default=[0.0, 0.05],
        help="Subband minima [eV], ascending"
    )
    p.add_argument(
        "--tol-ueV", type=float, default=FERMI_TOL_J / Q * 1e6,
        help="Bisection tolerance [µeV]"
    )
    p.add_argument("--debug", action="store_true", help="Verbose bisection prints")
    p.set_defaults(cmd="fermi")
    return p


def _to_args(ns: argparse.Namespace) -> _FermiArgs:
    return _FermiArgs(
        config=ns.config,
        T_K=float(ns.T),
        m_rel=float(ns.m_rel),
        N_m2=float(ns.N),
        subbands_eV=list(ns.subbands_eV),
        tol_ueV=float(ns.tol_ueV),
        debug=bool(ns.debug),
    )


def _run_fermi(args: _FermiArgs) -> int:
    if args.config is not None:
        spec = build_fermi_spec(load_config(args.config))
    else:
        spec = FermiRunSpec(
            T_K=args.T_K,
            m_kg=args.m_rel * M0,
            N_m2=args.N_m2,
            subbands_J=tuple(sorted(e * Q for e in args.subbands_eV)),
            tol_J=args.tol_ueV * 1e-6 * Q,
        )

    try:
        res = run_spec(spec, debug=args.debug)
    except DomainError as exc:
        logger.error(f"[run] {exc}")
        return 1
    if not res.ok:
        return 1

    print(f"E_F = {res.E_F_J / Q:+.9f} eV")
    for i, (E, n) in enumerate(zip(spec.subbands_J, res.populations_m2)):
        print(f"  subband {i}: E_min = {E / Q:+.6f} eV | N = {n:.6e} m^-2")
    print(f"  total:                  N = {sum(res.populations_m2):.6e} m^-2")
    return 0


# --------------------------------- main() ------------------------------------


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="qwfermi: Fermi level of a multi-subband 2DEG")
    sub = parser.add_subparsers(dest="cmd")

    fermi_parser = _add_fermi_subparser(sub)

    argv = list(sys.argv[1:] if argv is None else argv)

    # If no subcommand given, default to 'fermi' with defaults
    if not argv:
        return _run_fermi(_to_args(fermi_parser.parse_args([])))

    ns = parser.parse_args(argv)
    if ns.cmd == "fermi":
        return _run_fermi(_to_args(ns))

    parser.error("Unknown command (try: fermi)")
    return 2


if __name__ == "__main__":
    sys.exit(main())
