# topmark:header:start
#
#   project      : TagPrint
#   file         : options.py
#   file_relpath : src/tagprint/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, JSON input) and their
resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import json
import logging
from typing import Callable, ParamSpec, TypeVar

import click

from tagprint.cli.errors import TagprintUsageError
from tagprint.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the internal logging level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        TagprintUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set CRITICAL level.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise TagprintUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.CRITICAL
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase diagnostic logging. Repeat for more detail (up to -vvv).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log critical diagnostics.",
    )(f)
    return f


def json_input_option(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the --json flag controlling how VALUE arguments are decoded."""
    return click.option(
        "--json",
        "as_json",
        is_flag=True,
        default=False,
        help="Decode each VALUE as JSON (numbers, booleans, arrays, objects).",
    )(f)


def decode_values(values: tuple[str, ...], *, as_json: bool) -> list[object]:
    """Return the CLI VALUE arguments, JSON-decoded when requested.

    Args:
        values (tuple[str, ...]): Raw positional arguments.
        as_json (bool): Decode every argument as JSON.

    Returns:
        list[object]: The values to format.

    Raises:
        TagprintUsageError: If an argument is not valid JSON.
    """
    if not as_json:
        return list(values)
    decoded: list[object] = []
    for raw in values:
        try:
            decoded.append(json.loads(raw))
        except json.JSONDecodeError as exc:
            raise TagprintUsageError(f"Invalid JSON value {raw!r}: {exc.msg}") from exc
    return decoded
