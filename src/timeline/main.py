"""Application entry point for the timeline web front end."""

from timeline.app import App
from timeline.config import Config
from timeline.logging import setup_logging
from timeline.web.runner import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
