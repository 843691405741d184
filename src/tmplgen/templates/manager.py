"""High-level template management operations."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..errors import OutputExistsError, TemplateNotFoundError

SHARED_DIRNAME = "_shared"
RESERVED_PREFIX = "_"


def list_templates(templates_root: Path) -> List[str]:
    """Return template names: non-reserved directories directly under the root."""
    if not templates_root.is_dir():
        return []
    return sorted(
        entry.name
        for entry in templates_root.iterdir()
        if entry.is_dir() and not entry.name.startswith(RESERVED_PREFIX)
    )


def get_template_dir(templates_root: Path, template_name: str) -> Path:
    """Get the directory path for a template."""
    return templates_root / template_name


def resolve_template_dir(templates_root: Path, template_name: str) -> Path:
    """Return the template directory, raising when it does not exist."""
    template_dir = get_template_dir(templates_root, template_name)
    if not template_dir.exists():
        raise TemplateNotFoundError(template_name, list_templates(templates_root))
    return template_dir


def resolve_output_dir(generated_root: Path, project_name: str, dry_run: bool) -> Path:
    """Return the output directory for a project.

    Outside of dry-run mode an existing directory is refused; nothing is ever
    merged into a previous output tree. Dry runs skip the check.
    """
    output_dir = generated_root / project_name
    if not dry_run and output_dir.exists():
        raise OutputExistsError(output_dir)
    return output_dir
