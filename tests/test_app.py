from __future__ import annotations

import socket

import app


def test_find_free_port_skips_a_listening_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.bind(("localhost", 0))
        listener.listen(1)
        taken = listener.getsockname()[1]

        port = app.find_free_port(taken, span=5)

    assert port != taken
    assert taken < port < taken + 5


def test_server_is_the_flask_app():
    assert app.server is app.app.server
