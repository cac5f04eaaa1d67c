import os
import sys
from collections.abc import Mapping
from typing import TextIO

DEFAULT_SIZE = (80, 24)


def get_terminal_size(stream: TextIO | None = None) -> tuple[int, int]:
    """Columns and rows of the terminal behind ``stream`` (stdout by default).

    Streams that are not attached to a terminal report ``DEFAULT_SIZE``.
    """
    if stream is None:
        stream = sys.stdout
    if not stream.isatty():
        return DEFAULT_SIZE
    try:
        columns, lines = os.get_terminal_size(stream.fileno())
    except OSError:
        return DEFAULT_SIZE
    return (columns, lines)


def supports_truecolour(environ: Mapping[str, str] | None = None) -> bool:
    """Whether the terminal advertises 24-bit colour through $COLORTERM."""
    if environ is None:
        environ = os.environ
    return environ.get("COLORTERM", "").lower() in ("truecolor", "24bit")
