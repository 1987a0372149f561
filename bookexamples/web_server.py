"""A tiny HTTP server answering with static pages from a directory."""

import socket
import time
from functools import partial
from pathlib import Path

from bookexamples.thread_pool import ThreadPool

_GET = b"GET / HTTP/1.1\r\n"
_SLEEP = b"GET /sleep HTTP/1.1\r\n"
_BUFFER_SIZE = 512
SLEEP_SECONDS = 5


def build_response(request, root="."):
    """The full HTTP response bytes for a raw request."""
    if request.startswith(_GET):
        status_line, filename = "200 OK", "hello.html"
    elif request.startswith(_SLEEP):
        time.sleep(SLEEP_SECONDS)
        status_line, filename = "200 OK", "hello.html"
    else:
        status_line, filename = "404 NOT FOUND", "404.html"

    contents = (Path(root) / filename).read_text(encoding="utf-8")
    return f"HTTP/1.1 {status_line}\r\n\r\n{contents}".encode("utf-8")


def handle_connection(connection, root="."):
    """Read one request from a socket, answer it and close the socket."""
    with connection:
        request = connection.recv(_BUFFER_SIZE)
        connection.sendall(build_response(request, root))


def serve(host="127.0.0.1", port=7878, root=".", workers=4):
    """Accept connections forever, handing each to the worker pool."""
    with socket.create_server((host, port)) as listener:
        with ThreadPool(workers) as pool:
            try:
                while True:
                    connection, _ = listener.accept()
                    pool.execute(partial(handle_connection, connection, root))
            except KeyboardInterrupt:
                pass
            print("Shutting down.")