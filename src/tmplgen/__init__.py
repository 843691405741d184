"""tmplgen - scaffold projects from file-tree templates."""

__version__ = "0.1.0"
