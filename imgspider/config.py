"""Command-line options of the spider and their validation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Sequence

from .tools import atoi, is_digit, is_dir

DEFAULT_DEPTH = 5
DEFAULT_PATH = "./data"
MAX_ARGS = 6
MAX_URL_LENGTH = 1024
MAX_PATH_LENGTH = 1023
_OPTION_FLAGS = ("r", "l", "p")


class ArgumentError(ValueError):
    """Raised when the command-line arguments are invalid."""


@dataclass
class SpiderConfig:
    """Settings for one spider run."""

    url: str
    hostname: str
    use_tls: bool = False
    recursive: bool = False
    depth: int = DEFAULT_DEPTH
    path: str = DEFAULT_PATH
    path_selected: bool = False
    depth_selected: bool = False

    def describe(self) -> str:
        """Return a human-readable summary of the settings."""
        return (
            f"hostname = {self.hostname}\n"
            f"pathName = {self.path}\n"
            f"deepness = {self.depth}\n"
            f"b pathName = {int(self.path_selected)}\n"
            f"b deepness = {int(self.depth_selected)}\n"
            f"b https = {int(self.use_tls)}\n"
            "\n\n"
        )


def hostname_from_url(url: str) -> str:
    """Return the host part of an ``http://`` or ``https://`` URL.

    The host must be followed by a ``/``.
    """
    for scheme in ("http://", "https://"):
        if url.startswith(scheme):
            rest = url[len(scheme):]
            break
    else:
        raise ArgumentError("URL error: No http(s) found in the last argument")
    host, slash, _ = rest.partition("/")
    if not slash:
        raise ArgumentError(f"Error Url: no '/' found at the end [{rest}]")
    return host


def _apply_flag(config: SpiderConfig, flag: str) -> None:
    if flag not in _OPTION_FLAGS:
        raise ArgumentError(f"Option Error: {flag} is not a recognized option")
    if not config.recursive and flag == "r":
        config.recursive = True
    elif not config.path_selected and flag == "p":
        config.path_selected = True
    elif not config.path_selected and flag == "l":
        config.depth_selected = True


def _apply_path(config: SpiderConfig, arg: str, path_given: bool) -> bool:
    """Take ``arg`` as the output directory if it qualifies; return whether a path is set."""
    if not config.path_selected:
        return path_given
    if not (is_dir(arg) and os.access(arg, os.R_OK | os.W_OK)):
        return path_given
    if len(arg) > MAX_PATH_LENGTH:
        raise ArgumentError(
            f"The name of your directory {arg} is too long "
            f"{MAX_PATH_LENGTH} char max"
        )
    if path_given:
        raise ArgumentError(f"Error [{arg}]: Do not suggest more then one PathName")
    config.path = arg
    return True


def _apply_depth(config: SpiderConfig, arg: str) -> None:
    if arg.startswith("http"):
        return
    if config.depth_selected and is_digit(arg):
        if config.depth != DEFAULT_DEPTH:
            raise ArgumentError(f"Error [{arg}]: Do not suggest more then one deepness")
        config.depth = atoi(arg)


def parse_args(argv: Sequence[str]) -> SpiderConfig:
    """Build a :class:`SpiderConfig` from arguments (without the program name).

    The last argument is the URL to crawl.
    """
    args = list(argv)
    if not 1 <= len(args) <= MAX_ARGS:
        raise ArgumentError(f"expected between 1 and {MAX_ARGS} arguments")
    url = args[-1]
    hostname = hostname_from_url(url)
    if len(url) > MAX_URL_LENGTH:
        raise ArgumentError(
            f"The url is to long, it must be lesser then {MAX_URL_LENGTH}"
        )
    config = SpiderConfig(url=url, hostname=hostname, use_tls=url.startswith("https://"))

    path_given = False
    for arg in args:
        if arg.startswith("-"):
            for flag in arg[1:]:
                _apply_flag(config, flag)
        else:
            path_given = _apply_path(config, arg, path_given)
            _apply_depth(config, arg)

    if not is_dir(config.path):
        raise ArgumentError("The directory mentioned do not exist")
    return config