import socket
from unittest.mock import patch

import pytest

from bookexamples.web_server import build_response, handle_connection

HELLO = "<h1>Hello!</h1>"
NOT_FOUND = "<h1>Oops!</h1>"


@pytest.fixture
def root(tmp_path):
    (tmp_path / "hello.html").write_text(HELLO, encoding="utf-8")
    (tmp_path / "404.html").write_text(NOT_FOUND, encoding="utf-8")
    return tmp_path


def test_root_request_gets_hello_page(root):
    response = build_response(b"GET / HTTP/1.1\r\nHost: localhost\r\n\r\n", root)
    assert response == b"HTTP/1.1 200 OK\r\n\r\n" + HELLO.encode()


def test_unknown_path_gets_not_found_page(root):
    response = build_response(b"GET /missing HTTP/1.1\r\n\r\n", root)
    assert response == b"HTTP/1.1 404 NOT FOUND\r\n\r\n" + NOT_FOUND.encode()


def test_empty_request_gets_not_found_page(root):
    assert build_response(b"", root).startswith(b"HTTP/1.1 404 NOT FOUND\r\n\r\n")


def test_sleep_request_waits_then_answers(root):
    with patch("bookexamples.web_server.time.sleep") as sleep:
        response = build_response(b"GET /sleep HTTP/1.1\r\n\r\n", root)
    sleep.assert_called_once_with(5)
    assert response == b"HTTP/1.1 200 OK\r\n\r\n" + HELLO.encode()


def test_missing_page_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        build_response(b"GET / HTTP/1.1\r\n\r\n", tmp_path)


def test_handle_connection_answers_over_socket(root):
    client, server = socket.socketpair()
    with client:
        client.sendall(b"GET / HTTP/1.1\r\n\r\n")
        handle_connection(server, root)
        received = b""
        while chunk := client.recv(1024):
            received += chunk
    assert received == b"HTTP/1.1 200 OK\r\n\r\n" + HELLO.encode()
    assert server.fileno() == -1