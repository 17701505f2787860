import os
import socket
import socketserver
import threading

import pytest

from imgspider.http import (
    USER_AGENT,
    HttpError,
    build_request,
    download,
    fetch,
    image_file_name,
    split_header,
)


class _Handler(socketserver.BaseRequestHandler):
    def handle(self):
        data = b""
        while b"\r\n\r\n" not in data:
            chunk = self.request.recv(4096)
            if not chunk:
                break
            data += chunk
        self.server.requests.append(data)
        target = data.split(b" ")[1].decode()
        self.request.sendall(self.server.responses.get(target, b"HTTP/1.1 404 Not Found\r\n\r\n"))


class _Server(socketserver.ThreadingTCPServer):
    daemon_threads = True
    allow_reuse_address = True


@pytest.fixture
def server():
    srv = _Server(("127.0.0.1", 0), _Handler)
    srv.responses = {}
    srv.requests = []
    thread = threading.Thread(target=srv.serve_forever, daemon=True)
    thread.start()
    yield srv
    srv.shutdown()
    srv.server_close()


def _host(srv):
    return f"127.0.0.1:{srv.server_address[1]}"


def test_build_request_plain():
    assert build_request("/", "example.com") == (
        b"GET / HTTP/1.1\r\nHost: example.com\r\nConnection: close\r\n\r\n"
    )


def test_build_request_browser_headers():
    request = build_request("/img/a.png", "example.com", True)
    assert request.startswith(b"GET /img/a.png HTTP/1.1\r\nHost: example.com\r\n")
    assert f"User-Agent: {USER_AGENT}\r\n".encode() in request
    assert b"Referer: https://example.com/\r\n" in request
    assert b"Accept: */*\r\n" in request
    assert request.endswith(b"Connection: close\r\n\r\n")


def test_build_request_too_long():
    with pytest.raises(HttpError):
        build_request("/" + "x" * 2000, "example.com")


def test_split_header():
    header, body = split_header(b"HTTP/1.1 200 OK\r\nA: b\r\n\r\n\x00\x01\r\n\r\nrest")
    assert header == b"HTTP/1.1 200 OK\r\nA: b"
    assert body == b"\x00\x01\r\n\r\nrest"


def test_split_header_missing_separator():
    with pytest.raises(HttpError):
        split_header(b"HTTP/1.1 200 OK\r\n")


def test_image_file_name(tmp_path):
    directory = str(tmp_path)
    assert image_file_name("/img/deep/a.jpg", directory) == os.path.join(directory, "a.jpg")
    assert image_file_name("b.png", directory) == os.path.join(directory, "b.png")


def test_fetch_returns_whole_response(server):
    response = b"HTTP/1.1 200 OK\r\n\r\n<html>hello</html>"
    server.responses["/"] = response
    assert fetch(_host(server), "/") == response
    assert server.requests[0] == build_request("/", _host(server))


def test_fetch_browser_headers_sent(server):
    server.responses["/p"] = b"HTTP/1.1 200 OK\r\n\r\n"
    fetch(_host(server), "/p", False, True)
    assert server.requests[0] == build_request("/p", _host(server), True)


def test_fetch_connection_refused():
    probe = socket.socket()
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    with pytest.raises(HttpError):
        fetch(f"127.0.0.1:{port}", "/")


def test_download_writes_body(server, tmp_path):
    body = bytes(range(256)) * 100
    server.responses["/img/a.png"] = b"HTTP/1.1 200 OK\r\nContent-Type: image/png\r\n\r\n" + body
    destination = tmp_path / "a.png"
    written = download(_host(server), "/img/a.png", str(destination))
    assert written == len(body)
    assert destination.read_bytes() == body


def test_download_without_header_end(server, tmp_path):
    server.responses["/x.gif"] = b"garbage without separator"
    destination = tmp_path / "x.gif"
    with pytest.raises(HttpError):
        download(_host(server), "/x.gif", str(destination))
    assert not destination.exists()