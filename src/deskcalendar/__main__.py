"""Entry point for running deskcalendar as a module.

Usage: python -m deskcalendar
"""

import sys
import logging


def main():
    """Main entry point for the application."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # QApplication must exist before the system color scheme can be read
    from PyQt6.QtWidgets import QApplication
    from deskcalendar.config.constants import APP_NAME
    from deskcalendar.ui.main_window import CalendarWindow, build_controller

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)

    window = CalendarWindow(build_controller())
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
