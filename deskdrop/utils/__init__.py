"""
Utilities Module.

Provides reusable path helpers for the DeskDrop file-operation engine.

Modules:
- path_utils: existence checks, normalization, case-insensitive equality
"""

from deskdrop.utils.path_utils import (
    EntryKind,
    entry_kind,
    exists,
    normalize_path,
    paths_equal,
)

__all__ = [
    'EntryKind',
    'entry_kind',
    'exists',
    'normalize_path',
    'paths_equal',
]
