"""Registry module for packaged solver defaults."""
from __future__ import annotations

from pathlib import Path
from typing import Any

from ..utils import load_yaml

# Registry paths
REGISTRY_PATH = Path(__file__).resolve().parent
SOLVER_DEFAULTS_PATH = REGISTRY_PATH / "solver_defaults.yaml"

# Private caches
_SOLVER_DEFAULTS: dict[str, Any] | None = None


def load_solver_defaults() -> dict[str, Any]:
    """Load solver defaults. Args: none. Returns: dict."""
    global _SOLVER_DEFAULTS
    if _SOLVER_DEFAULTS is None:
        _SOLVER_DEFAULTS = load_yaml(SOLVER_DEFAULTS_PATH)
    return _SOLVER_DEFAULTS


def _section(name: str) -> dict[str, Any]:
    """Return one mapping section of the defaults, raising if it is malformed."""
    section = load_solver_defaults().get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' must be a mapping in {SOLVER_DEFAULTS_PATH}")
    return section


def default_loopy_steps() -> tuple[str, ...]:
    """Return the default Loopy step order. Args: none. Returns: tuple[str,...]."""
    return tuple(_section("loopy").get("steps") or ())


def default_loopy_max_passes() -> int | None:
    """Return the configured Loopy pass cap, or None for the edge-count bound."""
    value = _section("loopy").get("max_passes")
    return None if value is None else int(value)


def default_net_seed_steps() -> tuple[str, ...]:
    """Return the Net steps seeded for every tile. Args: none. Returns: tuple[str,...]."""
    return tuple(_section("net").get("seed_steps") or ())


def default_log_level() -> str:
    """Return the default CLI log level name. Args: none. Returns: str."""
    return str(_section("logging").get("level") or "WARNING").upper()
