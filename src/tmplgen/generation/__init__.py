"""Generation config and substitution for tmplgen."""

from .options import GenerationConfig, parse_args
from .variables import derive_variables, find_variables, replace_variables

__all__ = [
    "GenerationConfig",
    "parse_args",
    "derive_variables",
    "find_variables",
    "replace_variables",
]
