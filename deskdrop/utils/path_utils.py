"""
Path Utilities Module.

Provides the path checks used by every file operation:
- Existence checks that never raise
- Path normalization
- Case-insensitive path equality
"""

import os
from enum import Enum
from pathlib import Path
from typing import Optional, Union


PathLike = Union[str, os.PathLike]


class EntryKind(str, Enum):
    """What a path currently points at."""
    FILE = "file"
    DIRECTORY = "directory"
    MISSING = "missing"


def _is_blank(path: Optional[PathLike]) -> bool:
    return path is None or os.fspath(path) == ""


def exists(path: Optional[PathLike]) -> bool:
    """
    Check whether a path is an existing file or directory.

    Args:
        path: Path to check. ``None`` and ``""`` are allowed.

    Returns:
        True if the path resolves to a file or directory, False otherwise
        (including for empty input)

    Example:
        >>> exists("")
        False
    """
    if _is_blank(path):
        return False
    p = Path(path)
    return p.is_file() or p.is_dir()


def entry_kind(path: Optional[PathLike]) -> EntryKind:
    """Report whether a path is a file, a directory, or missing."""
    if _is_blank(path):
        return EntryKind.MISSING
    p = Path(path)
    if p.is_dir():
        return EntryKind.DIRECTORY
    if p.is_file():
        return EntryKind.FILE
    return EntryKind.MISSING


def normalize_path(path: PathLike) -> str:
    """
    Normalize a path to absolute form for comparison.

    - Converts backslashes to forward slashes
    - Resolves . and .. components
    - Removes trailing slashes
    - Does not follow symlinks

    Args:
        path: Path to normalize

    Returns:
        Absolute path string with forward slashes

    Example:
        >>> normalize_path("/data/docs/subfolder/../")
        '/data/docs'
    """
    raw = os.fspath(path).replace('\\', '/')
    normalized = os.path.abspath(os.path.normpath(raw))
    return normalized.replace('\\', '/')


def paths_equal(path_a: Optional[PathLike], path_b: Optional[PathLike]) -> bool:
    """
    Compare two paths ignoring case and formatting differences.

    Args:
        path_a: First path
        path_b: Second path

    Returns:
        True if both normalize to the same absolute path (case-insensitive),
        False if they differ or either is empty

    Example:
        >>> paths_equal("C:\\\\a\\\\b", "c:\\\\A\\\\B")
        True
    """
    if _is_blank(path_a) or _is_blank(path_b):
        return False
    return normalize_path(path_a).casefold() == normalize_path(path_b).casefold()
