# tasks.py
"""
Developer task runner using Invoke.
Run `inv --list` to see tasks.

Key tasks:
  inv parse --text "50k ăn sáng"
  inv add --text "350k khách sạn" --scope TRIP --trip dalat
  inv test
  inv clean
"""

from invoke import task
from pathlib import Path
import shutil
import sys


REPO = Path(__file__).parent
CACHE_DIRS = [REPO / ".pytest_cache"]


def _python():
    """Return the python executable inside the current venv."""
    return sys.executable or "python"


@task(
    help={
        "text": "Smart-input text, e.g. '50k ăn sáng'",
        "json": "Emit JSON instead of the human-readable preview",
        "keywords": "Optional YAML keyword file",
    }
)
def parse(c, text, json=False, keywords=None):
    """Preview how one input would be parsed."""
    args = ["-m", "cli.chitieu", "parse", f'"{text}"']
    if json:
        args.append("--json")
    if keywords:
        args += ["--keywords", f'"{keywords}"']
    c.run(f'"{_python()}" ' + " ".join(args), pty=False, warn=True)


@task(
    help={
        "text": "Smart-input text",
        "category": "Manual category override (FOOD, TRANSPORT, ...)",
        "scope": "PERSONAL or TRIP (default: PERSONAL)",
        "trip": "Trip id, required with --scope TRIP",
        "date": "YYYY-MM-DD (default: today)",
    }
)
def add(c, text, category=None, scope="PERSONAL", trip=None, date=None):
    """Build a transaction record from one input."""
    args = ["-m", "cli.chitieu", "add", f'"{text}"', "--scope", scope]
    if category:
        args += ["--category", category]
    if trip:
        args += ["--trip", f'"{trip}"']
    if date:
        args += ["--date", date]
    c.run(f'"{_python()}" ' + " ".join(args), pty=False, warn=True)


@task
def test(c):
    """Run unit tests with pytest."""
    c.run(f'"{_python()}" -m pytest -q', pty=False)


@task
def clean(c):
    """Delete test caches and __pycache__ folders."""
    for d in CACHE_DIRS + list(REPO.rglob("__pycache__")):
        if d.exists():
            shutil.rmtree(d)
            print(f"Removed {d}")
