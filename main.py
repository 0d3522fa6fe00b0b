import sys
import os
import logging
import traceback

# Ensure imports work when running from any directory
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from gui import CategoryAdminApp


def _global_exception_handler(exc_type, exc_value, exc_tb):
    """Last-resort handler for unhandled exceptions — log and show dialog."""
    if exc_type is KeyboardInterrupt:
        sys.__excepthook__(exc_type, exc_value, exc_tb)
        return
    msg = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
    logging.critical(f"UNHANDLED EXCEPTION:\n{msg}")
    try:
        from tkinter import messagebox
        messagebox.showerror(
            "Unexpected Error",
            f"An unexpected error occurred:\n\n{exc_value}\n\n"
            f"Details have been written to debug.log.")
    except Exception:
        pass  # If even tkinter fails, at least we logged it


def main():
    sys.excepthook = _global_exception_handler
    app = CategoryAdminApp()
    # Errors raised inside tk callbacks bypass sys.excepthook
    app.root.report_callback_exception = _global_exception_handler
    app.run()


if __name__ == "__main__":
    main()
