"""PocketPaste command line.

Changes:
  - 2026-10-19: Network failures exit with code 3 instead of a traceback.
  - 2026-10-14: Added `delete` subcommand (reports not implemented, exit 2).
  - 2026-10-13: Read paste text from stdin when no file is given.
  - 2026-10-12: Initial `post` / `get` subcommands with Rich logging.
"""

import argparse
import asyncio
import logging
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

import httpx

from pocketpaste.config import get_settings
from pocketpaste.integrations.pastebin import (
    EXPIRATION_OPTIONS,
    PRIVACY_OPTIONS,
    InvalidOptionError,
    PasteOptions,
    get_pastebin_client,
)
from pocketpaste.logging_setup import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_USAGE = 2
EXIT_NETWORK = 3


def _version() -> str:
    try:
        return get_version("pocketpaste")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pocketpaste",
        description="📋 PocketPaste - post to and read from Pastebin",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pocketpaste post notes.txt --privacy private --expiration "1 day"
  cat build.log | pocketpaste post --name "build log" --format text
  pocketpaste get abc123XY
""",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    post = sub.add_parser("post", help="Create a paste and print its URL")
    post.add_argument("file", nargs="?", default="-", help="File to upload ('-' for stdin)")
    post.add_argument("--name", help="Paste title")
    post.add_argument("--privacy", help=f"One of {', '.join(PRIVACY_OPTIONS)} or 0-2")
    post.add_argument("--expiration", help=f"One of: {', '.join(EXPIRATION_OPTIONS)}")
    post.add_argument("--format", help="Syntax highlighting language")

    get = sub.add_parser("get", help="Print the raw content of a paste")
    get.add_argument("paste_id")

    delete = sub.add_parser("delete", help="Delete a paste (not supported yet)")
    delete.add_argument("paste_id")

    return parser


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def _privacy_arg(value: str | None) -> str | int | None:
    # "0".."2" on the command line mean numeric codes
    if value is not None and value.isdigit():
        return int(value)
    return value


async def run(args: argparse.Namespace) -> int:
    client = get_pastebin_client()

    if args.command == "post":
        options = PasteOptions(
            name=args.name,
            privacy=_privacy_arg(args.privacy),
            expiration=args.expiration,
            format=args.format,
        )
        url = await client.post(_read_text(args.file), options)
        print(url.strip())
        return EXIT_OK

    if args.command == "get":
        content = await client.get(args.paste_id)
        if content is None:
            logger.error("Paste %s not found", args.paste_id)
            return EXIT_NOT_FOUND
        sys.stdout.write(content)
        return EXIT_OK

    await client.delete(args.paste_id)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(level="DEBUG" if args.verbose else settings.log_level)

    try:
        return asyncio.run(run(args))
    except InvalidOptionError as e:
        logger.error("%s", e)
        return EXIT_USAGE
    except NotImplementedError as e:
        logger.error("%s", e)
        return EXIT_USAGE
    except httpx.HTTPError as e:
        logger.error("Pastebin request failed: %s", e)
        return EXIT_NETWORK


if __name__ == "__main__":
    raise SystemExit(main())
