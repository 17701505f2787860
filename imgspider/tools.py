"""Small helpers shared by the spider: numeric parsing, path checks, usage text."""

from __future__ import annotations

import os
import sys
from typing import TextIO

USAGE = (
    "Usage: ./spider [-rlp] URL\n"
    "\tOption -r : recursively downloads the images in a URL received as a parameter.\n"
    "\tOption -r -l [N] : indicates the maximum depth level of the recursive download.\n"
    "\tIf not indicated, it will be 5.\n"
    "\tOption -p [PATH] : indicates the path where the downloaded files will be saved.\n"
    "\tIf not specified, ./data/ will be used.\n"
)

_WHITESPACE = " \t\n\v\f\r"


def is_digit(text: str) -> bool:
    """Return True when every character of ``text`` is an ASCII digit.

    An empty string counts as all digits.
    """
    return all("0" <= char <= "9" for char in text)


def atoi(text: str) -> int:
    """Parse a leading integer the way C ``atoi`` does.

    Leading whitespace is skipped, any run of sign characters is folded into
    one sign, and parsing stops at the first non-digit. No digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    while rest[:1] in ("-", "+") and rest:
        if rest[0] == "-":
            sign = -sign
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return sign * value


def is_dir(path: str | os.PathLike[str]) -> bool:
    """Return True when ``path`` names an existing directory."""
    return os.path.isdir(path)


def usage(file: TextIO | None = None) -> None:
    """Write the command-line usage text to ``file`` (standard error by default)."""
    (file if file is not None else sys.stderr).write(USAGE)