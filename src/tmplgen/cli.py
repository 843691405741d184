"""CLI interface for tmplgen - project scaffolding from file-tree templates."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Tuple

import click

from .config import describe, get_paths, load_catalog
from .errors import OutputExistsError, TemplateNotFoundError, UsageError
from .generation import GenerationConfig, derive_variables, parse_args
from .templates import (
    list_templates,
    process_template,
    resolve_output_dir,
    resolve_template_dir,
)
from .utils import console, err_console

RULE = "━" * 50


def usage_text() -> str:
    """Build the usage text, listing the templates found on disk."""
    paths = get_paths()
    catalog = load_catalog(paths.templates_root)
    names = list_templates(paths.templates_root)
    width = max((len(n) for n in names), default=0)
    lines = []
    for name in names:
        description = describe(catalog, name)
        line = f"  {name.ljust(width)}"
        lines.append(f"{line}  - {description}" if description else line.rstrip())
    template_lines = "\n".join(lines)
    return f"""
Usage: tmplgen generate <template> <project-name> [options]

Templates:
{template_lines or "  (none found)"}

Options:
  --entity <name>   Entity name in PascalCase (e.g., User, Product)
  --title <text>    Page title
  --pages <list>    Comma-separated page names (multi-page only)
  --dry-run         Preview without creating files

Examples:
  tmplgen generate list-page user-admin --entity User --title "User Management"
  tmplgen generate multi-page my-dashboard --pages "Dashboard,Users,Settings"
"""


def print_banner(
    config: GenerationConfig, output_dir: Path, variables: Dict[str, str]
) -> None:
    console.print("")
    console.print("🚀 Template Generator")
    console.print(RULE)
    console.print(f"Template:    {config.template}", markup=False)
    console.print(f"Project:     {config.project_name}", markup=False)
    console.print(f"Output:      {output_dir}", markup=False)
    console.print("")
    console.print("Variables:")
    for key, value in variables.items():
        console.print(f"  {key} → {value}", markup=False)
    console.print(RULE)
    console.print("")


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Project scaffolding from file-tree templates."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@cli.command("list")
@click.option("--detail", "detail", is_flag=True, default=False)
def list_cmd(detail: bool) -> None:
    """
    List available templates, optionally with their catalog description.
    """
    templates_root = get_paths().templates_root
    catalog = load_catalog(templates_root) if detail else {}
    for name in list_templates(templates_root):
        print(name)
        if detail and describe(catalog, name):
            print(f"  description: {describe(catalog, name)}")


@cli.command(
    "generate",
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
    add_help_option=False,
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def generate_cmd(args: Tuple[str, ...]) -> None:
    """
    Generate a project from a template.

    Usage: tmplgen generate <template> <project-name> [--entity NAME]
    [--title TEXT] [--pages "A,B,C"] [--dry-run]

    The template directory is copied to generated/<project-name>. Files ending
    in .template lose the suffix and get their {{TOKENS}} replaced; _shared
    directories are skipped.
    """
    try:
        config = parse_args(args)
    except UsageError:
        console.print(usage_text(), markup=False)
        raise SystemExit(1)

    paths = get_paths()
    try:
        template_dir = resolve_template_dir(paths.templates_root, config.template)
        output_dir = resolve_output_dir(
            paths.generated_root, config.project_name, config.dry_run
        )
    except TemplateNotFoundError as e:
        err_console.print(f"❌ {e}", style="bold red", markup=False)
        err_console.print(
            f"   Available templates: {', '.join(e.available)}", markup=False
        )
        raise SystemExit(1)
    except OutputExistsError as e:
        err_console.print(f"❌ {e}", style="bold red", markup=False)
        err_console.print("   Remove it first or choose a different project name.")
        raise SystemExit(1)

    variables = derive_variables(config)
    print_banner(config, output_dir, variables)

    if config.dry_run:
        console.print("🔍 DRY RUN - No files will be created\n")
    else:
        output_dir.mkdir(parents=True, exist_ok=True)

    process_template(template_dir, output_dir, variables, config.dry_run)

    console.print("")
    if config.dry_run:
        console.print("✅ Dry run complete. Run without --dry-run to generate files.")
        return

    console.print("✅ Generation complete!", style="green")
    console.print("")
    console.print("Next steps:")
    console.print(f"  cd generated/{config.project_name}", markup=False)
    console.print("  pnpm install")
    console.print("  pnpm dev")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
