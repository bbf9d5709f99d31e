"""
Token input acquisition: argument, piped stdin, or the system clipboard
"""
import sys
from typing import TextIO

import pyperclip
from loguru import logger

from jut.core.exceptions import ClipboardReadError, EmptyClipboard, StdinReadError


def read_stdin(stdin: TextIO) -> str:
    """Read all of stdin, stripped"""
    try:
        return stdin.read().strip()
    except (OSError, UnicodeDecodeError) as e:
        raise StdinReadError(str(e)) from e


def read_clipboard() -> str:
    """
    Read the system clipboard, stripped

    Raises:
        ClipboardReadError: If no clipboard mechanism is available or it fails
        EmptyClipboard: If the clipboard holds only whitespace
    """
    try:
        text = pyperclip.paste()
    except pyperclip.PyperclipException as e:
        raise ClipboardReadError(str(e)) from e

    text = (text or "").strip()
    if not text:
        raise EmptyClipboard()
    return text


def read_token(token: str | None = None, stdin: TextIO | None = None) -> str:
    """
    Resolve the raw token text

    An explicit argument wins. Otherwise stdin is read when it is a pipe or
    redirect, and the clipboard when stdin is an interactive terminal.

    Args:
        token: Positional argument, if given
        stdin: Input stream (defaults to sys.stdin)

    Returns:
        Token text with surrounding whitespace removed
    """
    if token is not None:
        logger.debug("Reading token from argument")
        return token.strip()

    stdin = stdin if stdin is not None else sys.stdin
    if stdin is not None and not stdin.isatty():
        logger.debug("Reading token from stdin")
        return read_stdin(stdin)

    logger.debug("Reading token from clipboard")
    return read_clipboard()
