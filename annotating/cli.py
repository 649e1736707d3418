#!/usr/bin/env python3
"""
Annotating CLI - inspect and normalize annotation store files.

Commands:
- validate: parse a store file and report the first problem
- format:   re-serialize a store file (compact or indented)
- show:     print a summary of title, tags, channels and groups
- lookup:   print the content of the first entry matching a target

The CLI never populates stores. It reads them, and `format` writes the
normalized form back out.

Exit Codes:
===========
- 0: Success
- 1: Invalid store document (shape or target decode error)
- 2: Invalid arguments
- 3: Lookup found no matching entry
- 4: File error (not found, permissions, encoding)
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .channels import CHANNELS, get_channel
from .config import ENV_JSON_INDENT, SerializationOptions, options_from_env
from .errors import (
    AnnotationFileError,
    AnnotationParseError,
    AnnotationValidationError,
)
from .files import load_store, save_store
from .serialization import serialize_store
from .store import AnnotationStore

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_DOCUMENT = 1
EXIT_USAGE = 2
EXIT_NOT_FOUND = 3
EXIT_FILE_ERROR = 4


def _load(path: str) -> AnnotationStore:
    return load_store(Path(path))


def _run_loading(func, args: argparse.Namespace) -> int:
    """Run a command, mapping store errors to exit codes."""
    try:
        return func(args)
    except AnnotationFileError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR
    except AnnotationParseError as e:
        print(f"✗ Invalid annotation store {args.file}: {e}", file=sys.stderr)
        return EXIT_INVALID_DOCUMENT
    except AnnotationValidationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE


def cmd_validate(args: argparse.Namespace) -> int:
    store = _load(args.file)
    groups = sum(len(g) for _, g in store.channels())
    print(f"✓ Annotation store is valid: {args.file}")
    print(f"  Groups: {groups}")
    return EXIT_OK


def cmd_format(args: argparse.Namespace) -> int:
    if args.indent is not None and args.indent < 0:
        print(f"ERROR: --indent cannot be negative: {args.indent}", file=sys.stderr)
        return EXIT_USAGE

    store = _load(args.file)

    options = options_from_env()
    indent = args.indent if args.indent is not None else options.indent
    options = SerializationOptions(indent=indent, ensure_ascii=args.ascii)

    if args.output:
        path = save_store(store, Path(args.output), options)
        logger.info(f"Wrote normalized store to {path}")
    else:
        print(serialize_store(store, options))
    return EXIT_OK


def cmd_show(args: argparse.Namespace) -> int:
    store = _load(args.file)

    print(f"Title: {store.title if store.title is not None else '(none)'}")
    print(f"Tags: {', '.join(store.tags) if store.tags else '(none)'}")
    for channel, groups in store.channels():
        if not groups:
            continue
        print(f"[{channel.key}] {channel.name} targets: {len(groups)} group(s)")
        for group in groups:
            title = group.title if group.title is not None else "(untitled)"
            line = f"  - {title}: {len(group)} entries"
            if group.comment is not None:
                line += f" ({group.comment})"
            print(line)
    return EXIT_OK


def cmd_lookup(args: argparse.Namespace) -> int:
    channel = get_channel(args.channel)
    target = channel.codec.try_decode(args.target)
    if target is None:
        print(
            f"ERROR: {args.target!r} is not a valid {channel.codec.type_name} target",
            file=sys.stderr,
        )
        return EXIT_USAGE

    store = _load(args.file)
    for group in store.groups(channel):
        if args.group is not None and group.title != args.group:
            continue
        entry = group.get_entry(target)
        if entry is not None:
            print(entry.content)
            return EXIT_OK

    print(f"No entry for target {args.target!r}", file=sys.stderr)
    return EXIT_NOT_FOUND


def build_parser() -> argparse.ArgumentParser:
    channel_names = ", ".join(f"{c.name} ({c.key})" for c in CHANNELS)
    parser = argparse.ArgumentParser(
        prog="annotating",
        description="Inspect and normalize annotation store files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  annotating validate zhouyi.json
  annotating format zhouyi.json --indent 2 -o zhouyi.pretty.json
  annotating lookup zhouyi.json --channel sequence --group Names --target 111111

Environment:
  {ENV_JSON_INDENT}  default indent for `format`

Exit Codes:
  0 - Success
  1 - Invalid store document
  2 - Invalid arguments
  3 - No matching entry
  4 - File error
        """,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to execute")

    validate_parser = subparsers.add_parser("validate", help="Parse a store file and report problems")
    validate_parser.add_argument("file", help="Path to store JSON file")
    validate_parser.set_defaults(func=cmd_validate)

    format_parser = subparsers.add_parser("format", help="Re-serialize a store file")
    format_parser.add_argument("file", help="Path to store JSON file")
    format_parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help=f"Indent width (default: compact, or ${ENV_JSON_INDENT})",
    )
    format_parser.add_argument(
        "--ascii",
        action="store_true",
        help="Escape non-ASCII characters",
    )
    format_parser.add_argument("-o", "--output", help="Write to this file instead of stdout")
    format_parser.set_defaults(func=cmd_format)

    show_parser = subparsers.add_parser("show", help="Summarize a store file")
    show_parser.add_argument("file", help="Path to store JSON file")
    show_parser.set_defaults(func=cmd_show)

    lookup_parser = subparsers.add_parser("lookup", help="Print the content annotating a target")
    lookup_parser.add_argument("file", help="Path to store JSON file")
    lookup_parser.add_argument(
        "--channel",
        default="string",
        help=f"Channel name or key: {channel_names} (default: string)",
    )
    lookup_parser.add_argument("--group", default=None, help="Only search groups with this title")
    lookup_parser.add_argument("--target", required=True, help="Encoded target, e.g. 111111 or '111111 2'")
    lookup_parser.set_defaults(func=cmd_lookup)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entrypoint.

    Parses arguments and dispatches to subcommands.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    return _run_loading(args.func, args)


if __name__ == "__main__":
    sys.exit(main())
