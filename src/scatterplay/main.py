"""
File: main.py
Description: Main entry point for the Scatterplay application
"""

import argparse
import logging
import sys

import matplotlib
matplotlib.use('QtAgg')

from PyQt6.QtWidgets import QApplication

from .utils.logger import setup_logging, shutdown_logging
from .utils.config import Config
from .ui.main_window import MainWindow


def setup_exception_handling(app):
    """Setup global exception handler."""
    def handle_exception(exc_type, exc_value, exc_traceback):
        """Handle uncaught exceptions."""
        if issubclass(exc_type, KeyboardInterrupt):
            app.quit()
            return

        logging.error("Uncaught exception", exc_info=(
            exc_type, exc_value, exc_traceback))

    sys.excepthook = handle_exception


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Correlation & Regression Explorer')
    parser.add_argument('--config', type=str,
                        help='Path to config directory')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug mode')
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the application."""
    args = parse_args(argv)
    try:
        config = Config(config_dir=args.config)

        level = "DEBUG" if args.debug else config.log_level
        setup_logging(level=level, log_to_file=config.log_to_file,
                      log_dir=config.get_config_dir().parent / 'logs')

        app = QApplication.instance() or QApplication(sys.argv)
        setup_exception_handling(app)

        window = MainWindow(config=config)
        window.show()

        return app.exec()

    except Exception as e:
        logging.error(f"Application error: {e}", exc_info=True)
        return 1
    finally:
        shutdown_logging()


if __name__ == "__main__":
    sys.exit(main())
