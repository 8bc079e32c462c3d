from __future__ import annotations

import os


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


# Contraction closure of K_n has Bell(n) elements; 0 disables the ceiling.
MAX_VERTICES = _env_int("CHROMTOOLS_MAX_VERTICES", 12)

# How long the worker blocks on the change signal before re-checking shutdown.
IDLE_WAIT_S = _env_float("CHROMTOOLS_IDLE_WAIT_S", 0.05)

LOG_LEVEL = os.environ.get("CHROMTOOLS_LOG_LEVEL", "WARNING").upper()

