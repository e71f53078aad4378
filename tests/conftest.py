# tests/conftest.py
import pytest
import yaml


@pytest.fixture
def keywords_file(tmp_path):
    """Write a YAML keyword file and return its path."""

    def _write(cfg, name="keywords.yaml"):
        p = tmp_path / name
        with open(p, "w", encoding="utf-8") as f:
            yaml.safe_dump(cfg, f, allow_unicode=True)
        return p

    return _write


@pytest.fixture
def movie_keywords(keywords_file):
    return keywords_file(
        {
            "extend": True,
            "keywords": [
                {"key": "phim", "category": "ENTERTAINMENT"},
                {"key": "trà sữa", "category": "FOOD"},
            ],
        }
    )
