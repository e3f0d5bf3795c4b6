"""
solver/config.py

Connection settings for the external solver.

Defaults can be overridden with environment variables:
  - NETSOLVE_API_URL
  - NETSOLVE_TIMEOUT (seconds)
  - NETSOLVE_UNIQUE_NAMES ("1", "true" or "yes" to reject duplicate names)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_API_URL = "https://www.wolframcloud.com/obj/herzeghenrique/MinhaAPI_Circuitos_V16"
DEFAULT_TIMEOUT = 60.0

# Multipart field the solver reads the netlist JSON from
NETLIST_FIELD = "netlist"

USER_DATA_DIR = Path.home() / ".netsolve"


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


def _env_timeout() -> float:
    raw = os.environ.get("NETSOLVE_TIMEOUT", "")
    try:
        timeout = float(raw) if raw else DEFAULT_TIMEOUT
    except ValueError:
        return DEFAULT_TIMEOUT
    # requests rejects zero and negative timeouts
    return timeout if timeout > 0 else DEFAULT_TIMEOUT


@dataclass
class SolverSettings:
    """Where and how to reach the solver."""

    api_url: str = field(default_factory=lambda: os.environ.get("NETSOLVE_API_URL", DEFAULT_API_URL))
    timeout: float = field(default_factory=_env_timeout)
    require_unique_names: bool = field(default_factory=lambda: _env_flag("NETSOLVE_UNIQUE_NAMES"))

    def __post_init__(self):
        if self.timeout <= 0:
            raise ValueError(f"Solver timeout must be positive, got {self.timeout:g}")
