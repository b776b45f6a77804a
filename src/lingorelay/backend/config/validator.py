"""Utilities for validating the bundled configuration and surfacing issues."""

from __future__ import annotations

import argparse
from typing import Sequence

from .settings import (
    ConfigurationError,
    LanguageDefaults,
    LanguageTable,
    load_language_table,
    load_settings,
)


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def _validate_sources(defaults: LanguageDefaults, table: LanguageTable) -> list[str]:
    errors: list[str] = []

    if not any(sentinel in table for sentinel in defaults.source.auto_sentinels):
        errors.append(
            _format_scope("source", "no auto-detection sentinel is listed in the language table")
        )

    default = defaults.source.default
    if not defaults.is_auto(default) and default not in table:
        errors.append(_format_scope("source.default", f"unknown language code '{default}'"))

    return errors


def _validate_targets(defaults: LanguageDefaults, table: LanguageTable) -> list[str]:
    errors: list[str] = []

    for endpoint in ("translate", "batch"):
        target = defaults.resolve_target(None, endpoint=endpoint)
        if defaults.is_auto(target):
            errors.append(
                _format_scope(f"targets.{endpoint}", "target cannot request auto-detection")
            )
        elif target not in table:
            errors.append(
                _format_scope(f"targets.{endpoint}", f"unknown language code '{target}'")
            )

    return errors


def _validate_aliases(defaults: LanguageDefaults, table: LanguageTable) -> list[str]:
    errors: list[str] = []

    for alias, canonical in defaults.aliases.items():
        if alias == canonical:
            errors.append(_format_scope(f"aliases.{alias}", "alias maps onto itself"))
        if canonical not in table:
            errors.append(
                _format_scope(f"aliases.{alias}", f"unknown canonical code '{canonical}'")
            )
        if canonical in defaults.aliases:
            errors.append(
                _format_scope(f"aliases.{alias}", f"canonical code '{canonical}' is also an alias")
            )

    return errors


def validate_configuration(
    defaults: LanguageDefaults | None = None,
    table: LanguageTable | None = None,
) -> list[str]:
    """Return a list of validation issues for the provided configuration."""

    if defaults is None:
        defaults = load_settings({}).defaults
    if table is None:
        table = load_language_table()

    errors: list[str] = []
    errors.extend(_validate_sources(defaults, table))
    errors.extend(_validate_targets(defaults, table))
    errors.extend(_validate_aliases(defaults, table))
    return errors


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate the bundled language defaults and language table."
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print detected issues",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)

    try:
        issues = validate_configuration()
    except (ConfigurationError, FileNotFoundError) as error:
        print(f"failed to load configuration: {error}")
        return 1

    if issues:
        print(f"{len(issues)} issue(s) detected:")
        for issue in issues:
            print(f"  - {issue}")
        return 1

    if not args.quiet:
        print("OK")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
