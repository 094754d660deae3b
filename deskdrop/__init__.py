"""
DeskDrop - file operations behind desktop drag-and-drop.

Copies, moves or creates shortcuts for a batch of dropped paths, recording
one outcome per item.
"""

from deskdrop.errors import (
    AlreadyExistsError,
    ErrorKind,
    FileOperationError,
    NotFoundError,
    OperationCancelledError,
    PlatformLinkError,
)
from deskdrop.models import (
    BatchItemOutcome,
    BatchResult,
    FileSystemEntry,
    OutcomeStatus,
    ShortcutRequest,
    TransferRequest,
)
from deskdrop.execution import (
    DropBatchProcessor,
    ItemTransferEngine,
    ShortcutCreator,
    process_dropped_paths,
)

__version__ = "1.0.0"

__all__ = [
    "AlreadyExistsError",
    "ErrorKind",
    "FileOperationError",
    "NotFoundError",
    "OperationCancelledError",
    "PlatformLinkError",
    "BatchItemOutcome",
    "BatchResult",
    "FileSystemEntry",
    "OutcomeStatus",
    "ShortcutRequest",
    "TransferRequest",
    "DropBatchProcessor",
    "ItemTransferEngine",
    "ShortcutCreator",
    "process_dropped_paths",
]
