from __future__ import annotations

from pathlib import Path
from typing import List


class TmplgenError(Exception):
    """Base class for errors reported to the user by the CLI"""


class UsageError(TmplgenError):
    """Raise when the template or project name positional argument is missing"""


class TemplateNotFoundError(TmplgenError):
    """Raise when no directory exists for the requested template"""

    def __init__(self, template: str, available: List[str]) -> None:
        super().__init__(f'Template "{template}" not found.')
        self.template = template
        self.available = available


class OutputExistsError(TmplgenError):
    """Raise when the output directory of a non-dry run is already present"""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Output directory already exists: {path}")
        self.path = path
