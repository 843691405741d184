from __future__ import annotations

import pytest

from tmplgen.errors import UsageError
from tmplgen.generation import GenerationConfig, parse_args


def test_positional_only_keeps_empty_options() -> None:
    config = parse_args(["list-page", "my-users"])
    assert config == GenerationConfig(
        template="list-page",
        project_name="my-users",
        entity="",
        title="",
        pages="",
        dry_run=False,
    )


def test_all_flags() -> None:
    config = parse_args(
        [
            "multi-page",
            "my-admin",
            "--entity",
            "User",
            "--title",
            "User Management",
            "--pages",
            "Dashboard,Users",
            "--dry-run",
        ]
    )
    assert config.entity == "User"
    assert config.title == "User Management"
    assert config.pages == "Dashboard,Users"
    assert config.dry_run is True


@pytest.mark.parametrize("args", [[], ["list-page"]])
def test_missing_positionals_is_usage_error(args: list[str]) -> None:
    with pytest.raises(UsageError):
        parse_args(args)


def test_unknown_flags_are_ignored() -> None:
    config = parse_args(["list-page", "p", "--color", "--entity", "Order", "extra"])
    assert config.entity == "Order"
    assert config.title == ""
    assert config.dry_run is False


def test_flag_value_is_taken_verbatim() -> None:
    # the next token is the value even when it looks like a flag
    config = parse_args(["list-page", "p", "--title", "--dry-run"])
    assert config.title == "--dry-run"
    assert config.dry_run is False


def test_trailing_value_flag_without_value() -> None:
    config = parse_args(["list-page", "p", "--entity"])
    assert config.entity == ""


def test_config_is_immutable() -> None:
    config = parse_args(["list-page", "p"])
    with pytest.raises(AttributeError):
        config.entity = "User"  # type: ignore[misc]
