"""Recursive template tree materialization."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Literal, Optional

from ..generation import find_variables, replace_variables
from ..utils import console
from .manager import SHARED_DIRNAME

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".template"


@dataclass
class GeneratedEntry:
    kind: Literal["dir", "file"]
    path: Path
    variables: List[str] = field(default_factory=list)


def get_target_filename(filename: str) -> str:
    """Strip the template suffix from a filename, if present."""
    if filename.endswith(TEMPLATE_SUFFIX):
        return filename[: -len(TEMPLATE_SUFFIX)]
    return filename


def _read_text(path: Path) -> str:
    # newline="" keeps line endings as they are on disk
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _write_text(path: Path, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def process_template(
    src_dir: Path,
    dest_dir: Path,
    variables: Dict[str, str],
    dry_run: bool,
    entries: Optional[List[GeneratedEntry]] = None,
) -> List[GeneratedEntry]:
    """Copy src_dir into dest_dir, substituting tokens in template files.

    ``_shared`` directories are skipped at any depth. Files ending in
    ``.template`` lose the suffix and get their tokens replaced; every other
    file is copied byte for byte. In dry-run mode nothing is written and each
    directory and file is reported instead.

    Returns the reported entries in traversal order.
    """
    if entries is None:
        entries = []

    for src_path in sorted(src_dir.iterdir(), key=lambda p: p.name):
        if src_path.is_dir():
            if src_path.name == SHARED_DIRNAME:
                logger.debug(f"Skipping shared directory {src_path}")
                continue

            dest_subdir = dest_dir / src_path.name
            if dry_run:
                console.print(f"📁 [DIR]  {dest_subdir}", markup=False)
            else:
                logger.debug(f"Creating directory {dest_subdir}")
                dest_subdir.mkdir(parents=True, exist_ok=True)
            entries.append(GeneratedEntry(kind="dir", path=dest_subdir))

            process_template(src_path, dest_subdir, variables, dry_run, entries)
            continue

        is_template = src_path.name.endswith(TEMPLATE_SUFFIX)
        dest_path = dest_dir / get_target_filename(src_path.name)

        if is_template:
            logger.debug(f"Reading {src_path}")
            content = _read_text(src_path)
            used = find_variables(content, variables)
        else:
            used = []
        entries.append(GeneratedEntry(kind="file", path=dest_path, variables=used))

        if dry_run:
            console.print(f"📄 [FILE] {dest_path}", markup=False)
            if used:
                console.print(f"         Variables: {', '.join(used)}", markup=False)
        else:
            logger.debug(f"Writing {dest_path}")
            if is_template:
                _write_text(dest_path, replace_variables(content, variables))
            else:
                shutil.copyfile(src_path, dest_path)
            console.print(f"✅ {dest_path}", markup=False)

    return entries
