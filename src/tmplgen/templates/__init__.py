"""Template management for tmplgen."""

from .manager import (
    get_template_dir,
    list_templates,
    resolve_output_dir,
    resolve_template_dir,
)
from .processor import GeneratedEntry, get_target_filename, process_template

__all__ = [
    "GeneratedEntry",
    "get_target_filename",
    "get_template_dir",
    "list_templates",
    "process_template",
    "resolve_output_dir",
    "resolve_template_dir",
]
