"""Application entry point for the SessionAuth server."""

from sessionauth.app import App
from sessionauth.config import Config
from sessionauth.logging import setup_logging
from sessionauth.web.runner import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
