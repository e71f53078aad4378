# config/loader.py
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict

# Python 3.11 has tomllib; fall back to "tomli" on older versions
try:
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore[no-redef]

REPO = Path(__file__).resolve().parents[1]


def load_config(config_path: Path | None = None) -> Dict[str, Any]:
    """
    Load config.toml from repo root by default.
    """
    if config_path is None:
        config_path = REPO / "config.toml"

    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    with config_path.open("rb") as f:
        return tomllib.load(f)


def resolve_keywords_path(cfg: Dict[str, Any]) -> Path | None:
    """[categorizer] keywords_path, relative paths taken from the repo root."""
    raw = cfg.get("categorizer", {}).get("keywords_path")
    if not raw:
        return None
    p = Path(raw)
    return p if p.is_absolute() else REPO / p
