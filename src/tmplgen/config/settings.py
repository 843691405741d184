"""Install-location discovery.

The templates root and the generated-projects root both live at the
repository root, next to ``src/``. They are resolved once from this module's
path and handed to the processing functions explicitly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

logger = logging.getLogger(__name__)

TEMPLATES_DIRNAME = "templates"
GENERATED_DIRNAME = "generated"


@dataclass(frozen=True)
class GeneratorPaths:
    root: Path
    templates_root: Path
    generated_root: Path

    @classmethod
    def from_root(cls, root: Path) -> "GeneratorPaths":
        return cls(
            root=root,
            templates_root=root / TEMPLATES_DIRNAME,
            generated_root=root / GENERATED_DIRNAME,
        )


def discover_root() -> Path:
    """Return the repository root (src/tmplgen/config/settings.py -> root)."""
    return Path(__file__).resolve().parents[3]


@lru_cache(maxsize=1)
def get_paths() -> GeneratorPaths:
    """Return the generator paths for this install (memoized)."""
    paths = GeneratorPaths.from_root(discover_root())
    logger.debug(
        f"Templates root: {paths.templates_root}, generated root: {paths.generated_root}"
    )
    return paths
