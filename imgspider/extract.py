"""Extraction of image names and navigation links from raw HTML text."""

from __future__ import annotations

from typing import Iterable

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".gif", ".png", ".bmp")
MAX_IMAGE_NAME = 1999
MAX_LINK_LENGTH = 500
_NAME_DELIMITERS = ('"', ",")
_HREF = 'href="'


def strip_scheme(link: str) -> str:
    """Remove a leading ``http://`` or ``https://`` from ``link``."""
    for scheme in ("http://", "https://"):
        if link.startswith(scheme):
            return link[len(scheme):]
    return link


def _image_name_at(html: str, occurrence: int, extension: str) -> str:
    start = occurrence
    while start > 0 and html[start - 1] not in _NAME_DELIMITERS:
        start -= 1
    return html[start:occurrence + len(extension)]


def find_image_names(html: str, known: Iterable[str] = ()) -> list[str]:
    """Return image references in ``html`` not already in ``known``.

    Each extension is searched in turn; a name reaches back from the
    extension to the nearest double quote or comma. Names longer than the
    limit are skipped, and each name is reported once.
    """
    seen = set(known)
    found: list[str] = []
    for extension in IMAGE_EXTENSIONS:
        position = html.find(extension)
        while position != -1:
            name = _image_name_at(html, position, extension)
            if len(name) <= MAX_IMAGE_NAME and name not in seen:
                seen.add(name)
                found.append(name)
            position = html.find(extension, position + 1)
    return found


def find_links(html: str, url: str, known: Iterable[str] = ()) -> list[str]:
    """Return new ``href`` targets found up to each ``</nav>`` in ``html``.

    The href search runs from the start of the page and stops at the close of
    each navigation block in turn. Schemes are stripped from absolute links,
    and links starting with ``/`` are joined to ``url``. Raises
    :class:`ValueError` when a ``<nav`` has no closing tag.
    """
    table = list(known)
    added: list[str] = []
    position: int | None = 0
    nav_search = 0
    while True:
        nav_start = html.find("<nav", nav_search)
        if nav_start == -1:
            break
        nav_end = html.find("</nav>", nav_start)
        if nav_end == -1:
            raise ValueError("no end balise of nav founded")
        while position is not None:
            occurrence = html.find(_HREF, position)
            if occurrence == -1:
                position = None
                break
            if occurrence >= nav_end:
                position = occurrence
                break
            link_start = occurrence + len(_HREF)
            link_end = html.find('"', link_start)
            if link_end == -1:
                link_end = len(html)
            link = html[link_start:link_end]
            position = link_start + 1
            if len(link) >= MAX_LINK_LENGTH or link in table:
                continue
            link = strip_scheme(link)
            if url + link in table:
                continue
            table.append(link)
            added.append(link)
        nav_search = nav_start + 1
    return [url + link if link.startswith("/") else link for link in added]