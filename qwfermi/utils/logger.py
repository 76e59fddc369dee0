# -*- coding: utf-8 -*-
"""
Minimal timestamped logger for workflows and solver warnings.
info/debug -> stdout, warn/error -> stderr; callers gate debug lines themselves.
"""
import sys, time

def _stamp() -> str:
    return time.strftime('%H:%M:%S')

def debug(msg: str): print(f"[{_stamp()}] DEBUG: {msg}", file=sys.stdout)
def info(msg: str):  print(f"[{_stamp()}] {msg}", file=sys.stdout)
def warn(msg: str):  print(f"[{_stamp()}] WARNING: {msg}", file=sys.stderr)
def error(msg: str): print(f"[{_stamp()}] ERROR: {msg}", file=sys.stderr)
