# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Command line entry point for iterwiz."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import pathlib
import sys
from typing import TYPE_CHECKING

from .config import load_config
from .core.model_types import LogComponent
from .error_codes import error_code_for
from .exceptions import InputDecodeError, IterwizError
from .formatting import stringify
from .json import require_json_list
from .logging_utils import LOG_FORMATS, LOG_LEVELS, configure_logging, structured_extra

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .config import StringifyConfig
    from .json import JSONList

logger: logging.Logger = logging.getLogger("iterwiz.cli")

STDIN_MARKER = "-"


def _read_records(source: str) -> JSONList:
    label = "<stdin>" if source == STDIN_MARKER else source
    try:
        payload = sys.stdin.read() if source == STDIN_MARKER else pathlib.Path(source).read_text(encoding="utf-8")
        return require_json_list(payload)
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        # json.JSONDecodeError is a ValueError
        raise InputDecodeError(label, exc) from exc


def _stringify_options(args: argparse.Namespace) -> StringifyConfig:
    options = load_config(args.config).stringify
    overrides: dict[str, bool] = {}
    if args.escape_strings:
        overrides["escape_strings"] = True
    if args.include_private:
        overrides["include_private"] = True
    return dataclasses.replace(options, **overrides) if overrides else options


def _cmd_stringify(args: argparse.Namespace) -> int:
    options = _stringify_options(args)
    records = _read_records(args.path)
    print(stringify(records, config=options))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iterwiz",
        description="Render JSON records with the iterwiz stringify engine.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Select logging output format (defaults to $ITERWIZ_LOG_FORMAT or text).",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Select logging verbosity (defaults to $ITERWIZ_LOG_LEVEL or info).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    stringify_cmd = subparsers.add_parser(
        "stringify",
        help="Render a JSON array of objects as stringified text",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        description="Read a JSON array and print the stringified rendering of its items.",
    )
    stringify_cmd.add_argument(
        "path",
        nargs="?",
        default=STDIN_MARKER,
        metavar="PATH",
        help="JSON file to read ('-' reads standard input).",
    )
    stringify_cmd.add_argument(
        "-C",
        "--config",
        type=pathlib.Path,
        default=None,
        help="Path to an iterwiz configuration file.",
    )
    stringify_cmd.add_argument(
        "--escape-strings",
        action="store_true",
        help="JSON-escape text values instead of quoting them verbatim.",
    )
    stringify_cmd.add_argument(
        "--include-private",
        action="store_true",
        help="Include attributes whose names start with an underscore.",
    )
    stringify_cmd.set_defaults(handler=_cmd_stringify)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    _ = configure_logging(args.log_format, log_level=args.log_level)
    try:
        return int(args.handler(args))
    except IterwizError as exc:
        code = error_code_for(exc)
        logger.error(  # noqa: TRY400  # JUSTIFIED: expected user-facing failure; traceback is noise
            "[%s] %s",
            code,
            exc,
            extra=structured_extra(component=LogComponent.CLI, exit_code=2, error_code=code),
        )
        return 2


__all__ = ["main"]
