"""Local HTTP endpoint for upload tests."""

from __future__ import annotations

import socketserver
import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest


@dataclass
class CollectorServer:
    """A report collection endpoint answering every POST with a fixed response."""

    url: str
    status: int
    body: str
    received: list[tuple[str, bytes]] = field(default_factory=list)


@pytest.fixture
def collector() -> Iterator[Callable[..., CollectorServer]]:
    servers: list[ThreadingHTTPServer] = []

    def start(status: int = 200, body: str = "http test") -> CollectorServer:
        state = CollectorServer(url="", status=status, body=body)

        class Handler(BaseHTTPRequestHandler):
            def do_POST(self) -> None:  # noqa: N802
                length = int(self.headers.get("Content-Length", 0))
                content_type = self.headers.get("Content-Type", "")
                state.received.append((content_type, self.rfile.read(length)))
                payload = state.body.encode("utf-8")
                self.send_response(state.status)
                self.send_header("Content-Type", "text/plain; charset=utf-8")
                self.send_header("Content-Length", str(len(payload)))
                self.end_headers()
                self.wfile.write(payload)

            def log_message(self, format: str, *args: object) -> None:
                pass

        server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
        threading.Thread(target=server.serve_forever, daemon=True).start()
        servers.append(server)
        host, port = server.server_address[:2]
        state.url = f"http://{host}:{port}/report"
        return state

    yield start

    for server in servers:
        server.shutdown()
        server.server_close()


@pytest.fixture
def garbage_endpoint() -> Iterator[str]:
    """A TCP endpoint that reads the request and answers with something that is not HTTP."""

    class Handler(socketserver.StreamRequestHandler):
        def handle(self) -> None:
            length = 0
            while line := self.rfile.readline():
                if line in (b"\r\n", b"\n"):
                    break
                name, _, value = line.decode("latin-1").partition(":")
                if name.strip().lower() == "content-length":
                    length = int(value.strip())
            self.rfile.read(length)
            self.wfile.write(b"GARBAGE NOT HTTP\r\n\r\n")

    server = socketserver.ThreadingTCPServer(("127.0.0.1", 0), Handler)
    server.daemon_threads = True
    threading.Thread(target=server.serve_forever, daemon=True).start()
    host, port = server.server_address[:2]

    yield f"http://{host}:{port}/report"

    server.shutdown()
    server.server_close()
