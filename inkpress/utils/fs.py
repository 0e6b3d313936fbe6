#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for post directories.

Functions:
    list_entries: Directory entry names in listing order, None if missing
    copy_file: Byte-for-byte copy of a single file

Usage:
    from inkpress.utils.fs import list_entries

    names = list_entries(Path("posts/hello/images"))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
import shutil
from pathlib import Path
from typing import List, Optional


def list_entries(directory: Path) -> Optional[List[str]]:
    """
    List every entry of a directory in the order the OS yields them.

    Nothing is sorted or filtered: files, subdirectories and dotfiles are
    all returned.

    Args:
        directory: Directory to list

    Returns:
        Entry names, or None if the directory does not exist

    Raises:
        OSError: For any failure other than non-existence
            (NotADirectoryError, PermissionError, ...)
    """
    try:
        return os.listdir(directory)
    except FileNotFoundError:
        return None


def copy_file(source: Path, destination: Path) -> None:
    """
    Copy file contents from source to destination.

    Only bytes are copied, not permissions or timestamps.

    Raises:
        OSError: If source cannot be read or destination written
            (IsADirectoryError when source is a directory)
    """
    shutil.copyfile(source, destination)
