#!/usr/bin/env python3
"""
collins-dict: look up a word or phrase in the Collins English Dictionary

Usage:
    collins-dict serendipity
    collins-dict "take off"
    collins-dict apple --width 60 --synonyms all
    collins-dict apple --json

Exit status is 0 for a found or not-found word and for an unreachable site,
1 for bad usage and for pages that cannot be parsed or extracted.
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .config import LookupConfig, LookupSettings, SynonymPolicy
from .exceptions import (
    DictionaryError,
    NetworkError,
    ParseError,
    StructuralExtractionError,
    UsageError,
)
from .lookup import DictionaryLookup
from .renderer import TerminalRenderer, get_terminal_width, render_json

logger = logging.getLogger(__name__)

PROG = "collins-dict"


class _ArgumentParser(argparse.ArgumentParser):
    """Raise instead of exiting so main() owns every exit code"""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        allow_abbrev=False,
        usage=f"{PROG} <word/phrase> [options]",
        description="Look up a word or phrase in the Collins English Dictionary.",
    )
    parser.add_argument("term", help="word or phrase (quote phrases containing spaces)")
    parser.add_argument("--width", type=int, help="output width in columns (default: terminal width)")
    parser.add_argument(
        "--synonyms",
        choices=[policy.value for policy in SynonymPolicy],
        help="'drop-last' omits the final synonym like earlier releases; 'all' prints every one",
    )
    parser.add_argument("--json", action="store_true", help="print the extracted entries as JSON")
    parser.add_argument("--timeout", type=float, help="HTTP timeout in seconds")
    parser.add_argument("--log-level", help="logging level for stderr diagnostics")
    return parser


FLAG_OPTIONS = ("-h", "--help", "--json")
VALUE_OPTIONS = ("--width", "--synonyms", "--timeout", "--log-level")


def separate_term(argv: Sequence[str]) -> List[str]:
    """Move a term that starts with ``-`` behind ``--`` so it is not read as an option.

    ``collins-dict -ism --json`` becomes ``--json -- -ism``. Known options and
    their values are left alone.
    """
    args = list(argv)
    expects_value = False
    for index, arg in enumerate(args):
        if expects_value:
            expects_value = False
            continue
        if arg == "--":
            break
        option, has_value, _ = arg.partition("=")
        if option in VALUE_OPTIONS:
            expects_value = not has_value
            continue
        if arg in FLAG_OPTIONS:
            continue
        if arg.startswith("-"):
            return args[:index] + args[index + 1:] + ["--", arg]
        return args
    return args


def _is_argument_count_error(message: str) -> bool:
    return "required" in message or "unrecognized arguments" in message


def resolve_settings(args: argparse.Namespace) -> LookupSettings:
    settings = LookupConfig.from_env()
    return settings.with_overrides(
        width=args.width,
        timeout=args.timeout,
        synonym_policy=SynonymPolicy(args.synonyms) if args.synonyms else None,
        log_level=args.log_level.upper() if args.log_level else None,
    )


def _force_utf8_output() -> None:
    # The Windows console defaults to a legacy code page
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")


def main(argv: Optional[Sequence[str]] = None) -> int:
    _force_utf8_output()

    argv = sys.argv[1:] if argv is None else argv
    try:
        args = build_parser().parse_args(separate_term(argv))
        settings = resolve_settings(args)
    except UsageError as e:
        if _is_argument_count_error(str(e)):
            print(UsageError.message, file=sys.stderr)
        else:
            print(f"error: {e}", file=sys.stderr)
        print(f"usage: {PROG} <word/phrase>", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format=LookupConfig.LOGGING['format'],
        stream=sys.stderr,
    )

    term = args.term
    try:
        with DictionaryLookup(settings) as client:
            result = client.lookup(term)
    except NetworkError as e:
        # Soft failure
        logger.debug(f"Network failure: {e}")
        print(NetworkError.message, file=sys.stderr)
        return 0
    except (ParseError, StructuralExtractionError) as e:
        logger.debug(f"Extraction failure: {e}")
        print(type(e).message, file=sys.stderr)
        return 1
    except DictionaryError as e:
        print(f"{DictionaryError.message}: {e}", file=sys.stderr)
        return 1

    if args.json:
        render_json(result)
        return 0

    renderer = TerminalRenderer(
        sys.stdout,
        width=settings.width or get_terminal_width(),
        indent=settings.indent,
        synonym_policy=settings.synonym_policy,
    )
    renderer.render_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
