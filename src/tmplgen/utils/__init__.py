"""Utility modules for tmplgen."""

from .console import console, err_console

__all__ = ["console", "err_console"]
