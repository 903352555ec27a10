"""Command-line access to the helpers.

Every command prints exactly one result to stdout (JSON for structured results). Domain errors
are reported on stderr with exit status 2; a failed validation exits with status 1.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from src.config.logging import configure_logging
from src.config.settings import Settings, load_settings
from src.data.merge import MergeError, deep_merge
from src.forms.schema import Constraints, InputKind, ValidationOptions
from src.forms.validator import validate
from src.text.case import camel_case, kebab_case, snake_case
from src.text.distance import edit_distance
from src.text.numbers import NumberToWordsError, number_to_words
from src.text.pluralize import pluralize
from src.web.query import parse_query_string

logger = logging.getLogger(__name__)

EXIT_INVALID = 1
EXIT_ERROR = 2

_CASE_CONVERTERS = {
    "camel": camel_case,
    "kebab": kebab_case,
    "snake": snake_case,
}


def _dump(value: Any, settings: Settings) -> str:
    return json.dumps(value, ensure_ascii=False, indent=settings.output_indent or None)


def _load_json(path: str) -> Any:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _run(args: argparse.Namespace, settings: Settings) -> int:
    match args.command:
        case "words":
            print(number_to_words(args.number))
        case "plural":
            print(pluralize(args.word, args.count))
        case "distance":
            print(edit_distance(args.a, args.b))
        case "case":
            print(_CASE_CONVERTERS[args.style](args.text))
        case "query":
            print(_dump(parse_query_string(args.value), settings))
        case "merge":
            print(_dump(deep_merge(_load_json(args.target), _load_json(args.source)), settings))
        case "validate":
            max_length = args.max_length
            if max_length is None:
                max_length = settings.validation_max_length
            options = ValidationOptions(max_length=max_length, min=args.min, max=args.max)
            outcome = validate(args.value, args.kind, options, Constraints(required=args.required))
            print(_dump(outcome.model_dump(exclude_none=True), settings))
            if not outcome.valid:
                return EXIT_INVALID
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per helper."""

    parser = argparse.ArgumentParser(description="Text and data helper functions.")
    sub = parser.add_subparsers(dest="command", required=True)

    words = sub.add_parser("words", help="Spell a non-negative integer in English words.")
    words.add_argument("number", type=int)

    plural = sub.add_parser("plural", help="Pluralize an English noun.")
    plural.add_argument("word")
    plural.add_argument("--count", type=int, default=2)

    distance = sub.add_parser("distance", help="Levenshtein distance between two strings.")
    distance.add_argument("a")
    distance.add_argument("b")

    case = sub.add_parser("case", help="Convert a string to another case style.")
    case.add_argument("style", choices=sorted(_CASE_CONVERTERS))
    case.add_argument("text")

    query = sub.add_parser("query", help="Parse a URL or query string into JSON.")
    query.add_argument("value")

    merge = sub.add_parser("merge", help="Deep-merge SOURCE.json into TARGET.json.")
    merge.add_argument("target")
    merge.add_argument("source")

    check = sub.add_parser("validate", help="Validate and sanitize a raw input value.")
    check.add_argument("value")
    check.add_argument("--kind", default=InputKind.text.value)
    check.add_argument("--max-length", type=int, default=None)
    check.add_argument("--min", type=float, default=None)
    check.add_argument("--max", type=float, default=None)
    check.add_argument("--required", action="store_true")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""

    load_dotenv(".env")
    settings = load_settings()
    configure_logging(settings.log_level)

    args = build_parser().parse_args(argv)
    try:
        return _run(args, settings)
    except (NumberToWordsError, MergeError, ValueError, OSError) as exc:
        logger.info("command failed command=%s reason=%s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
