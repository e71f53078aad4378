# tests/test_config_loader.py
import pytest

from config.loader import REPO, load_config, resolve_keywords_path


def test_repo_config_loads():
    cfg = load_config()
    assert cfg["logging"]["level"] == "INFO"
    assert resolve_keywords_path(cfg) is None


def test_custom_config(tmp_path):
    p = tmp_path / "config.toml"
    p.write_text(
        '[logging]\nlevel = "DEBUG"\n\n[categorizer]\nkeywords_path = "config/keywords.example.yaml"\n',
        encoding="utf-8",
    )
    cfg = load_config(p)
    assert cfg["logging"]["level"] == "DEBUG"
    assert resolve_keywords_path(cfg) == REPO / "config" / "keywords.example.yaml"


def test_absolute_keywords_path(tmp_path):
    kw = tmp_path / "kw.yaml"
    assert resolve_keywords_path({"categorizer": {"keywords_path": str(kw)}}) == kw


def test_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.toml")
