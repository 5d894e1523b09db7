"""
Output sinks for summaries: standard output and the system clipboard
"""

import logging
import sys
from typing import TextIO, Optional

import pyperclip

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> bool:
    """
    Copy text to the system clipboard

    Clipboard access is best effort: failures are logged as warnings
    and reported through the return value.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.warning(f"Could not copy summary to clipboard: {e}")
        return False
    logger.debug("Copied summary to clipboard")
    return True


def emit_summary(text: str, copy: bool = True, stream: Optional[TextIO] = None) -> bool:
    """
    Print the summary, then copy it to the clipboard

    Returns:
        True if the clipboard write happened
    """
    print(text, file=stream or sys.stdout)
    if not copy:
        return False
    return copy_to_clipboard(text)
