"""Generation config and argument-token parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..errors import UsageError

ENTITY_FLAG = "--entity"
TITLE_FLAG = "--title"
PAGES_FLAG = "--pages"
DRY_RUN_FLAG = "--dry-run"

# flag -> GenerationConfig field; each consumes the following token verbatim
_VALUE_FLAGS = {
    ENTITY_FLAG: "entity",
    TITLE_FLAG: "title",
    PAGES_FLAG: "pages",
}


@dataclass(frozen=True)
class GenerationConfig:
    template: str
    project_name: str
    entity: str = ""
    title: str = ""
    pages: str = ""
    dry_run: bool = False


def parse_args(args: Sequence[str]) -> GenerationConfig:
    """Build a GenerationConfig from raw tokens.

    The first two tokens are the template and project name. After them,
    ``--entity``, ``--title`` and ``--pages`` take the next token as-is,
    ``--dry-run`` is a switch, and anything else is ignored. Omitted options
    stay empty; defaults are applied when deriving variables.
    """
    if len(args) < 2:
        raise UsageError("A template and a project name are required.")

    values = {"entity": "", "title": "", "pages": ""}
    dry_run = False
    i = 2
    while i < len(args):
        token = args[i]
        if token in _VALUE_FLAGS:
            i += 1
            values[_VALUE_FLAGS[token]] = args[i] if i < len(args) else ""
        elif token == DRY_RUN_FLAG:
            dry_run = True
        i += 1

    return GenerationConfig(
        template=args[0],
        project_name=args[1],
        dry_run=dry_run,
        **values,
    )
