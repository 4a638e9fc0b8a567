"""
File helpers for the floor plan stages.

Every OSError is re-raised as FileAccessError so the entry points can report
it and stop.
"""

import os

from svg_plan_config import PLACEHOLDER_HTML
from svg_plan_errors import FileAccessError


def ensure_file_exists(path, placeholder=PLACEHOLDER_HTML):
    """
    Create the file with placeholder content if it does not exist.

    Returns True when the file was created.
    """
    if os.path.exists(path):
        return False

    print(f"File {path} not found. Creating it with sample content...")
    write_text_file(path, placeholder)
    return True


def read_text_file(path):
    """Load the whole file as UTF-8 text."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except OSError as e:
        raise FileAccessError(f"Error reading file {path}: {e}") from e


def write_text_file(path, content):
    """Write text to the file as UTF-8, replacing any existing content."""
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
    except OSError as e:
        raise FileAccessError(f"Error writing file {path}: {e}") from e
