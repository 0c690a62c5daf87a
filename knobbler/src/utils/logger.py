"""Error reporting for knob hosts: log, optionally pop up, re-raise"""
import logging
import sys
from PyQt5.QtWidgets import QMessageBox

# Running from source re-raises untouched; frozen builds also report
DEBUG_MODE = not getattr(sys, 'frozen', False)

_logger = logging.getLogger('Knobbler')
_main_window = None

def set_main_window(window):
    """Window that owns error popups (the gallery sets itself)"""
    global _main_window
    _main_window = window

def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Report a knob error and raise it again.

    Args:
        e: Exception raised while building or driving a knob
        user_message: Popup text; defaults to str(e)
        title: Popup title

    From source the exception propagates as-is. In a frozen build it is
    logged with its traceback and shown in a QMessageBox when a window was
    registered through set_main_window, then re-raised.
    """
    if DEBUG_MODE:
        raise e

    _logger.error("%s: %s", title, e, exc_info=(type(e), e, e.__traceback__))

    message = user_message or str(e)
    if _main_window is not None:
        QMessageBox.critical(_main_window, title, message)
    else:
        _logger.error("No window for popup: %s - %s", title, message)

    raise e
