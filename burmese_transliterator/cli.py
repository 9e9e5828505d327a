#!/usr/bin/env python3
"""
Transliterator CLI

Command-line interface for Burmese → Devanagari transliteration.

Usage:
    python -m burmese_transliterator <text> [options]
    python -m burmese_transliterator မင်္ဂလာပါ
    python -m burmese_transliterator -f input.txt --breakdown
    python -m burmese_transliterator ဘာလဲ -m ဘာ=भा              # custom mapping
    python -m burmese_transliterator --samples

Options:
    -f, --file FILE        Read text from a file ("-" for stdin)
    -m, --map SRC=DST      Add a custom mapping (repeatable)
    --breakdown            Show the word-by-word breakdown
    --json                 Print results as JSON
    --samples              Convert the built-in sample texts
"""

import argparse
import json
import logging
import sys

from .config import ConfigError, load_settings
from .core import Transliterator, format_breakdown
from .dictionary import DictionaryLoadError
from .log import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="burmese-transliterate",
        description=(
            "Burmese → Devanagari Transliterator\n\n"
            "Converts Burmese text to Devanagari using longest-match-first\n"
            "lookup against a phrase and character table."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  burmese-transliterate မင်္ဂလာပါ\n"
            "  burmese-transliterate ကောင်းပါတယ် --breakdown\n"
            "  burmese-transliterate -f story.txt --json\n"
            "  burmese-transliterate ဘာလဲ -m ဘာ=भा          # override a mapping\n"
            "  echo ဘာလဲ | burmese-transliterate -f -\n"
        ),
    )

    parser.add_argument(
        "texts",
        nargs="*",
        help="Burmese text to convert",
    )
    parser.add_argument(
        "-f", "--file",
        default=None,
        help="Read input from a UTF-8 file, or '-' for stdin",
    )
    parser.add_argument(
        "-m", "--map",
        dest="mappings",
        action="append",
        default=[],
        metavar="SRC=DST",
        help="Add a custom mapping; later mappings take priority",
    )
    parser.add_argument(
        "--breakdown",
        action="store_true",
        help="Print the word-by-word breakdown after each output",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print each result as JSON",
    )
    parser.add_argument(
        "--samples",
        action="store_true",
        help="Convert the built-in sample texts",
    )
    parser.add_argument(
        "--dictionary",
        default=None,
        help="Use a different mapping table (JSON)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Settings file (TOML, [transliterator] table)",
    )
    parser.add_argument(
        "--unknown-marker",
        default=None,
        help="Text emitted for characters with no mapping",
    )
    parser.add_argument(
        "--passthrough",
        action="store_true",
        help="Copy unmapped characters to the output unchanged",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log progress (-vv for debug output)",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except (ConfigError, FileNotFoundError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    if args.dictionary:
        settings.dictionary_path = args.dictionary
    if args.unknown_marker is not None:
        settings.unknown_marker = args.unknown_marker
    if args.passthrough:
        settings.passthrough_unknown = True

    if args.verbose >= 2:
        setup_logging(logging.DEBUG)
    elif args.verbose == 1:
        setup_logging(logging.INFO)
    else:
        setup_logging(settings.log_level)

    inputs = list(args.texts)
    if args.file:
        try:
            inputs.append(_read_input(args.file))
        except (OSError, UnicodeDecodeError) as e:
            print(f"[ERROR] {args.file}: {e}", file=sys.stderr)
            return 1
    if args.samples:
        inputs.extend(Transliterator.sample_texts())

    if not inputs:
        parser.print_help()
        print("\nError: No input provided. Pass text, --file or --samples.")
        return 1

    try:
        engine = Transliterator(settings=settings)
    except DictionaryLoadError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    for raw in args.mappings:
        source, sep, target = raw.partition("=")
        if not sep or engine.add_mapping(source.strip(), target.strip()) is None:
            print(f"[ERROR] Invalid mapping {raw!r}, expected SRC=DST", file=sys.stderr)
            return 1

    for text in inputs:
        result = engine.convert(text)
        if args.json:
            print(json.dumps({"input": text, **result.to_dict()}, ensure_ascii=False))
            continue

        print(result.output)
        if args.breakdown and result.tokens:
            print("-" * 40)
            print(format_breakdown(result))
            print()

    return 0


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


if __name__ == "__main__":
    sys.exit(main())
