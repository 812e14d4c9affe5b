"""Bootstrap helpers shared across command-line entry points."""
from __future__ import annotations

import sys
from functools import lru_cache
from pathlib import Path


def _resolve_project_root() -> Path:
    """Return the repository root containing the ``src`` package."""

    current = Path(__file__).resolve().parents[1]
    if not (current / "src" / "core").exists():
        raise RuntimeError("Could not locate the project root. Expected 'src/core' next to scripts/.")
    return current


@lru_cache(maxsize=1)
def bootstrap_project() -> Path:
    """Put the repository root on ``sys.path`` once and return it."""

    project_root = str(_resolve_project_root())
    if project_root not in sys.path:
        sys.path.insert(0, project_root)
    return Path(project_root)
