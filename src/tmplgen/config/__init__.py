"""Configuration management for tmplgen."""

from .catalog import TemplateInfo, describe, load_catalog
from .settings import GeneratorPaths, get_paths

__all__ = [
    "GeneratorPaths",
    "TemplateInfo",
    "describe",
    "get_paths",
    "load_catalog",
]
