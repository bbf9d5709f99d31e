"""
jut - JWT decoder for your terminal
"""
import argparse
import sys
from typing import TextIO

from loguru import logger

from jut import __version__
from jut.config import get_settings
from jut.core.exceptions import JutError
from jut.core.logging import setup_logging
from jut.services.decoder import decode_token
from jut.services.input_source import read_token
from jut.services.renderer import make_console, render_json, render_pretty

USAGE_EPILOG = (
    "Usage:\n"
    "  jut                  decode JWT from clipboard\n"
    "  jut <token>          decode a JWT\n"
    "  echo <token> | jut   read from stdin\n"
)


def build_parser() -> argparse.ArgumentParser:
    """Command line parser"""
    parser = argparse.ArgumentParser(
        prog="jut",
        description="jut - JWT decoder for your terminal",
        epilog=USAGE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "token",
        nargs="?",
        default=None,
        help="JWT to decode (default: stdin when piped, else the clipboard)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="output raw JSON (no colors, for piping)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="disable colors in the interactive output",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="print version and exit",
    )
    return parser


def run(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """
    Decode one token and print it

    Returns:
        Process exit status: 0 on success, 1 on any fatal error
    """
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    args = build_parser().parse_args(argv)

    if args.version:
        print(f"jut {__version__}", file=stdout)
        return 0

    setup_logging()
    try:
        settings = get_settings()
        setup_logging(settings.log_level)

        token = read_token(args.token, stdin=stdin)
        decoded = decode_token(token)

        if args.json:
            print(render_json(decoded), file=stdout)
        else:
            color = not (args.no_color or settings.no_color)
            render_pretty(make_console(color=color, file=stdout), decoded, tz=settings.tzinfo)
    except JutError as e:
        logger.debug(f"Fatal {type(e).__name__}: {e.message}")
        print(f"jut: {e.message}", file=stderr)
        return 1

    return 0


def main():
    """Console script entry point"""
    sys.exit(run())


if __name__ == "__main__":
    main()
