"""
RPS Match - Rock, Paper, Scissors against a random bot

Entry point for the application.
"""

import logging
import sys

from PySide6.QtWidgets import QApplication

from config import init_config, PATHS, APP_NAME, APP_VERSION, APP_AUTHOR

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Log to the console and to the per-user log file."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(PATHS.log_file, encoding="utf-8"),
        ],
    )


def main() -> int:
    """Main entry point for RPS Match."""
    # Initialize configuration and directories
    init_config()
    setup_logging()
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)

    # Create application
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setOrganizationName(APP_AUTHOR)

    # Create and show main window
    from app import RPSMatchApp
    rps_app = RPSMatchApp()
    rps_app.show()

    # Run event loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
