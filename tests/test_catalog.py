from __future__ import annotations

from pathlib import Path

import pytest

from tmplgen.config import describe, load_catalog
from tmplgen.config.settings import GeneratorPaths, discover_root, get_paths


def test_load_catalog(tmp_path: Path) -> None:
    (tmp_path / "templates.yml").write_text(
        """
templates:
  list-page:
    description: Data list page with search and pagination
  bare-page:
""".lstrip(),
        encoding="utf-8",
    )
    catalog = load_catalog(tmp_path)
    assert describe(catalog, "list-page") == "Data list page with search and pagination"
    assert describe(catalog, "bare-page") == ""
    assert describe(catalog, "unknown") == ""


def test_missing_catalog_is_empty(tmp_path: Path) -> None:
    assert load_catalog(tmp_path) == {}


def test_malformed_catalog_raises(tmp_path: Path) -> None:
    (tmp_path / "templates.yml").write_text("templates:\n  - list-page\n")
    with pytest.raises(ValueError):
        load_catalog(tmp_path)


def test_bundled_catalog_covers_shipped_templates() -> None:
    paths = get_paths()
    catalog = load_catalog(paths.templates_root)
    for name in ("list-page", "detail-page", "multi-page"):
        assert (paths.templates_root / name).is_dir()
        assert describe(catalog, name)


def test_paths_derive_from_repo_root() -> None:
    root = discover_root()
    assert (root / "pyproject.toml").exists()
    assert get_paths() == GeneratorPaths.from_root(root)
    assert get_paths().generated_root == root / "generated"
