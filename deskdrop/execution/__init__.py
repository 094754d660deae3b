"""
Execution package for DeskDrop.

Handles the file operations behind a drag-and-drop gesture:
- File and directory copy/move
- Shortcut creation
- Batch processing of dropped paths
"""

from deskdrop.execution.transfer_engine import ItemTransferEngine
from deskdrop.execution.shortcut_backends import (
    DesktopEntryBackend,
    InternetShortcutBackend,
    LinkResult,
    ShellLinkBackend,
    ShortcutBackend,
    get_backend,
)
from deskdrop.execution.shortcut_creator import ShortcutCreator
from deskdrop.execution.batch_processor import DropBatchProcessor, process_dropped_paths

__all__ = [
    "ItemTransferEngine",
    "ShortcutBackend",
    "ShellLinkBackend",
    "DesktopEntryBackend",
    "InternetShortcutBackend",
    "LinkResult",
    "get_backend",
    "ShortcutCreator",
    "DropBatchProcessor",
    "process_dropped_paths",
]
