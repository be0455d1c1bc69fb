#!/usr/bin/env python3

"""
Main entry point for the NAS Link Notes application

This desktop application is a markdown note editor that turns NAS file paths
into per-OS link tables and applies inline colors to selected text.
"""

import sys
import logging

from PySide6.QtWidgets import QApplication

from nas_notes.core.app_state import AppState
from nas_notes.core.config import get_log_path
from nas_notes.ui.main_window import MainWindow


def setup_logging():
    """Log DEBUG to the file in the app directory and INFO to the console"""
    log_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(log_formatter)
    stream_handler.setLevel(logging.INFO)
    root_logger.addHandler(stream_handler)

    # Append to keep logs across runs
    log_file_path = get_log_path()
    file_handler = logging.FileHandler(log_file_path, 'a', encoding='utf-8')
    file_handler.setFormatter(log_formatter)
    file_handler.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    return log_file_path


def main():
    """Main application entry point"""
    log_file_path = setup_logging()
    logging.info("Starting NAS Link Notes")
    logging.debug(f"Logging DEBUG messages to: {log_file_path}")

    app_state = AppState()

    app = QApplication(sys.argv)
    app.setApplicationName("NAS Link Notes")
    app.setApplicationVersion("1.0.0")

    window = MainWindow(app_state)
    window.show()

    app.aboutToQuit.connect(app_state.close)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
