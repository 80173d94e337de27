import logging
import os
import socket

from synth_dashboard.ui.dash_app import create_dash_app
from synth_dashboard.logging_config import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

app = create_dash_app()
server = app.server

DEFAULT_PORT = 8050
PORT_SEARCH_SPAN = 100


def find_free_port(start_port: int, span: int = PORT_SEARCH_SPAN) -> int:
    """First port in [start_port, start_port + span) nothing listens on, else start_port."""
    for port in range(start_port, start_port + span):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            if sock.connect_ex(("localhost", port)) != 0:
                return port
    return start_port


def main() -> None:
    preferred_port = int(os.getenv("PORT", str(DEFAULT_PORT)))
    port = find_free_port(preferred_port)
    if port != preferred_port:
        logger.warning("port_taken", extra={"preferred_port": preferred_port, "port": port})

    app.run(host="0.0.0.0", port=port, debug=os.getenv("DEBUG", "0") == "1")


if __name__ == "__main__":
    main()
