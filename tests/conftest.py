from __future__ import annotations

from pathlib import Path
from typing import Dict

import pytest

import tmplgen.cli as cli_mod
from tmplgen.config.settings import GeneratorPaths


def write_tree(root: Path, files: Dict[str, str]) -> None:
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


@pytest.fixture
def paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> GeneratorPaths:
    """A throwaway repo root with a list-page template, wired into the CLI."""
    gen_paths = GeneratorPaths.from_root(tmp_path)
    write_tree(
        gen_paths.templates_root,
        {
            "list-page/page.template": "<h1>{{TITLE}}</h1>\n<List of={{ENTITY_NAME}} />\n",
            "list-page/package.json.template": '{"name": "{{PROJECT_NAME}}"}\n',
            "list-page/src/api.ts.template": "fetch('/api/{{ENTITY_NAME_LOWER}}s')\n",
            "list-page/src/logo.svg": "<svg>{{TITLE}}</svg>\n",
            "list-page/src/_shared/partial.txt": "shared\n",
            "list-page/_shared/common.template": "{{TITLE}}\n",
            "multi-page/App.tsx.template": "const pages = '{{PAGES}}';\n",
            "_shared/README.md": "common assets\n",
        },
    )
    monkeypatch.setattr(cli_mod, "get_paths", lambda: gen_paths)
    return gen_paths


def snapshot(root: Path) -> set[str]:
    return {str(p.relative_to(root)) for p in root.rglob("*")}
