#!/usr/bin/env python3
"""
Find scripture references in a message and print their verses.

Reads the message from the command line, or from stdin when none is given.
API settings come from the environment / .env (BIBLE_API_URL,
BIBLE_API_TOKEN, BIBLE_DEFAULT_VERSION).

Usage:
    find-verses "Joao 1:1-3 kjv"
    find-verses --version nvi "Leia Salmos 23 e Romanos 8:28"
    echo "Genesis 1:1" | find-verses --json
    find-verses --detect-only "John 3:16 and Psalm 23"
"""

import argparse
import asyncio
import json
import logging
import sys

from bible_refs.config import load_config
from bible_refs.services.references import ReferenceService


async def run(message: str, version: str = None, as_json: bool = False, detect_only: bool = False) -> int:
    """
    Resolve every reference in message and print the result.

    Returns:
        Exit code: 0 when every reference resolved, 1 if any failed,
        2 if no reference was found
    """
    async with ReferenceService(load_config()) as service:
        matches = service.match_references(message)
        if not matches:
            print("No references found.", file=sys.stderr)
            return 2

        if detect_only:
            for match in matches:
                print(match.original)
            return 0

        results = await service.resolve_all(matches, version)

    if as_json:
        print(json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False))
    else:
        for result in results:
            if result.error:
                print(f"[{result.book_name or '?'} {result.chapter}: {result.error.value}]", file=sys.stderr)
            for verse in result.verses:
                print(verse.text)

    return 1 if any(r.error for r in results) else 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Print the verses referenced in a message",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  find-verses "Joao 1:1-3 kjv"                 # Verses 1-3 in KJV
  find-verses --version nvi "Salmos 23"        # Whole chapter in NVI
  find-verses --json "Genesis 1:1"             # JSON output
        """
    )
    parser.add_argument(
        "message",
        nargs="?",
        help="Text containing references (default: read stdin)"
    )
    parser.add_argument(
        "--version",
        default=None,
        help="Version for references that do not name one"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON"
    )
    parser.add_argument(
        "--detect-only",
        action="store_true",
        help="List the references found without fetching them"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    message = args.message if args.message is not None else sys.stdin.read()
    return asyncio.run(run(message, args.version, args.json, args.detect_only))


if __name__ == "__main__":
    sys.exit(main())
