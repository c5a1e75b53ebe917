"""Load statusreport configuration from pyproject.toml and optional .statusreport.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class ReportConfig:
    """Runtime configuration for statusreport."""

    # Raise UnclassifiableStatusError instead of skipping contacts whose
    # status is not confirmed/pending/declined (or c/p/d)
    strict_status: bool = False
    # CLI: print a warning on stderr for every skipped contact
    warn_unclassified: bool = True
    # Prefix for price totals
    currency: str = "$"


def _read_toml(path: Path) -> dict:
    """Read a TOML file; return empty dict if missing or unparseable."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError, UnicodeDecodeError):
        return {}


def _apply(cfg: ReportConfig, d: dict) -> None:
    """Overlay dict values onto cfg, ignoring unknown keys."""
    valid = set(cfg.__dataclass_fields__)
    for key, val in d.items():
        if key in valid:
            setattr(cfg, key, val)


def load_config(project_root: Optional[Path] = None) -> ReportConfig:
    """Load config from pyproject.toml [tool.statusreport], then .statusreport.toml."""
    if project_root is None:
        project_root = Path.cwd()
    cfg = ReportConfig()
    pyproject = _read_toml(project_root / "pyproject.toml")
    _apply(cfg, pyproject.get("tool", {}).get("statusreport", {}))
    local = _read_toml(project_root / ".statusreport.toml")
    _apply(cfg, local)
    return cfg
