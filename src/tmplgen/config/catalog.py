"""Template catalog.

An optional ``templates.yml`` in the templates root describes each template:

    templates:
      list-page:
        description: Data list page with search and pagination

Templates on disk without an entry are still usable; the catalog only feeds
the usage text and ``tmplgen list --detail``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, TypedDict, cast

import yaml

CATALOG_FILENAME = "templates.yml"


class TemplateInfo(TypedDict):
    """Catalog metadata for a template."""

    description: Optional[str]  # Data list page with search and pagination


def _parse_catalog_dict(data: dict[str, object]) -> dict[str, TemplateInfo]:
    templates_section = data.get("templates") or {}
    if not isinstance(templates_section, dict):
        raise ValueError("'templates' section of the catalog must be a mapping")
    out: dict[str, TemplateInfo] = {}
    for k, v in templates_section.items():
        if not isinstance(k, str):
            raise ValueError("Key of catalog must be a string")
        v = cast(dict[str, Any], v or {})
        description = v.get("description")
        if not (isinstance(description, str) or description is None):
            raise ValueError(f"Description of template {k!r} must be a string")
        out[k] = TemplateInfo(description=description)
    return out


def load_catalog(templates_root: Path) -> Dict[str, TemplateInfo]:
    """Load the catalog from the templates root; empty when the file is absent."""
    path = templates_root / CATALOG_FILENAME
    if not path.is_file():
        return {}
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Catalog {path} must contain a mapping")
    return _parse_catalog_dict(data)


def describe(catalog: Dict[str, TemplateInfo], name: str) -> str:
    """Return the catalog description for a template, or an empty string."""
    info = catalog.get(name)
    if info is None:
        return ""
    return info.get("description") or ""
