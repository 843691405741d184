"""Substitution map derivation and token replacement."""

from __future__ import annotations

import logging
from typing import Dict

from .options import GenerationConfig

logger = logging.getLogger(__name__)

PROJECT_NAME = "{{PROJECT_NAME}}"
TITLE = "{{TITLE}}"
ENTITY_NAME = "{{ENTITY_NAME}}"
ENTITY_NAME_LOWER = "{{ENTITY_NAME_LOWER}}"
PAGES = "{{PAGES}}"

DEFAULT_PROJECT_NAME = "my-project"
DEFAULT_TITLE = "Page Title"
DEFAULT_ENTITY = "Item"


def derive_variables(config: GenerationConfig) -> Dict[str, str]:
    """Return the ordered token -> value map for a generation run."""
    entity = config.entity or DEFAULT_ENTITY
    variables: Dict[str, str] = {
        PROJECT_NAME: config.project_name or DEFAULT_PROJECT_NAME,
        TITLE: config.title or DEFAULT_TITLE,
        ENTITY_NAME: entity,
        ENTITY_NAME_LOWER: entity.lower(),
    }
    if config.pages:
        variables[PAGES] = config.pages
    return variables


def replace_variables(content: str, variables: Dict[str, str]) -> str:
    """Replace every token occurrence, one key at a time in map order.

    Each key is fully replaced before the next one, so a value containing a
    later token gets rewritten by that later key.
    """
    logger.debug(f"Applying substitution keys: {', '.join(variables)}")
    result = content
    for key, value in variables.items():
        result = result.replace(key, value)
    return result


def find_variables(content: str, variables: Dict[str, str]) -> list[str]:
    """Return the map keys that appear verbatim in content."""
    return [key for key in variables if key in content]
