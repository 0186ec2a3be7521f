"""
Application Initialization
==========================
Builds the main window and starts the Qt event loop.

Run with: python -m chisquarechart
"""
import logging
import sys

from chisquarechart.app.application import create_app
from chisquarechart.app.main_window import MainWindow
from chisquarechart.logging_config import setup_logging


def main() -> int:
    # Use logging.DEBUG to see every recomputation
    setup_logging(level=logging.INFO)

    app = create_app()
    window = MainWindow()
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
