"""Plain HTTP/1.1 requests over TCP or TLS, and image downloads."""

from __future__ import annotations

import os
import socket
import ssl

USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/90.0.0.0 Safari/537.36"
)
HTTP_PORT = 80
HTTPS_PORT = 443
MAX_REQUEST_LENGTH = 1023
_CHUNK_SIZE = 16384
_TIMEOUT = 30.0
_HEADER_END = b"\r\n\r\n"


class HttpError(Exception):
    """Raised when a request cannot be sent or its response is unusable."""


def build_request(path: str, host: str, browser_headers: bool = False) -> bytes:
    """Return the bytes of a ``GET`` request for ``path`` on ``host``.

    With ``browser_headers`` the request also carries a browser user agent,
    a referer and an ``Accept`` header.
    """
    lines = [f"GET {path} HTTP/1.1", f"Host: {host}"]
    if browser_headers:
        lines += [
            f"User-Agent: {USER_AGENT}",
            f"Referer: https://{host}/",
            "Accept: */*",
        ]
    lines.append("Connection: close")
    request = ("\r\n".join(lines) + "\r\n\r\n").encode()
    if len(request) > MAX_REQUEST_LENGTH:
        raise HttpError(f"request for {path} is too long")
    return request


def split_header(data: bytes) -> tuple[bytes, bytes]:
    """Split a raw response into its header block and its body."""
    header, separator, body = data.partition(_HEADER_END)
    if not separator:
        raise HttpError("no \\r\\n\\r\\n found in header")
    return header, body


def image_file_name(image_path: str, directory: str) -> str:
    """Return where the image at ``image_path`` is saved inside ``directory``."""
    name = image_path.rsplit("/", 1)[-1]
    return os.path.join(directory, name)


def _address(host: str, use_tls: bool) -> tuple[str, int]:
    name, separator, port = host.rpartition(":")
    if separator and name and port.isdigit():
        return name, int(port)
    return host, HTTPS_PORT if use_tls else HTTP_PORT


def _exchange(connection: socket.socket, request: bytes) -> bytes:
    connection.sendall(request)
    chunks = []
    while chunk := connection.recv(_CHUNK_SIZE):
        chunks.append(chunk)
    return b"".join(chunks)


def fetch(
    host: str, path: str, use_tls: bool = False, browser_headers: bool = False
) -> bytes:
    """Send a ``GET`` for ``path`` to ``host`` and return the whole raw response.

    ``host`` may carry an explicit ``:port``; otherwise port 80 or 443 is used.
    TLS connections verify the server certificate.
    """
    request = build_request(path, host, browser_headers)
    address = _address(host, use_tls)
    try:
        with socket.create_connection(address, timeout=_TIMEOUT) as raw:
            if use_tls:
                context = ssl.create_default_context()
                with context.wrap_socket(raw, server_hostname=address[0]) as secure:
                    return _exchange(secure, request)
            return _exchange(raw, request)
    except OSError as exc:
        raise HttpError(f"Could not fetch {path} from {host}: {exc}") from exc


def download(host: str, path: str, destination: str, use_tls: bool = False) -> int:
    """Fetch ``path`` and write the response body to ``destination``.

    Returns the number of bytes written.
    """
    response = fetch(host, path, use_tls, browser_headers=use_tls)
    _, body = split_header(response)
    with open(destination, "wb") as output:
        output.write(body)
    return len(body)