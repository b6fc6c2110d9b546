"""File-reading helpers for read-only Linux system statistics."""

from __future__ import annotations

import os
import re
from collections.abc import Callable
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _atoi(text: str) -> int:
    """Convert a strictly formatted decimal string to an int."""
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer literal: {text!r}")
    return int(text)


def path_read_str(path: PathLike) -> str:
    """Return the contents of a one-line file without its final newline."""
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    if not text:
        raise ValueError(f"{os.fspath(path)}: file is empty")
    return text[:-1]


def path_read_int(path: PathLike) -> int:
    """Return the contents of a one-line file as an integer."""
    return _atoi(path_read_str(path))


def scan_file(path: PathLike, parser: Callable[[str], bool]) -> None:
    """Feed each line of a file to ``parser`` until it returns a false value.

    Line terminators (``\\n`` and a preceding ``\\r``) are removed before the
    line is passed on. Exceptions raised by ``parser`` propagate.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        for raw in handle:
            line = raw[:-1] if raw.endswith("\n") else raw
            line = line.removesuffix("\r")
            if not parser(line):
                break