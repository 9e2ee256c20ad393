import logging
import os
import socket

from art_browser.logging_config import configure_logging
from art_browser.ui.dash_app import create_dash_app

DEFAULT_PORT = 8051
PORT_SEARCH_SPAN = 100

configure_logging()
logger = logging.getLogger("art_browser.app")

app = create_dash_app(os.getenv("ART_BROWSER_CONFIG_ROOT", "config"))
server = app.server


def find_free_port(start_port: int, span: int = PORT_SEARCH_SPAN) -> int:
    """First port in [start_port, start_port + span) nobody is listening on."""
    for port in range(start_port, start_port + span):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("localhost", port)) != 0:
                return port
    return start_port


def main() -> None:
    preferred_port = int(os.getenv("PORT", str(DEFAULT_PORT)))
    port = find_free_port(preferred_port)
    debug = os.getenv("DEBUG", "0") == "1"

    if port != preferred_port:
        logger.warning(
            "Port busy, serving the art browser elsewhere",
            extra={"preferred_port": preferred_port, "port": port},
        )

    logger.info("Starting art browser", extra={"port": port, "debug": debug})
    app.run(host="0.0.0.0", port=port, debug=debug)


if __name__ == "__main__":
    main()
