"""
Request and result models for DeskDrop.

All models are transient values; nothing here is persisted.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from deskdrop.config import TransferMode
from deskdrop.errors import ErrorKind
from deskdrop.utils.path_utils import EntryKind, entry_kind


class OutcomeStatus(str, Enum):
    """Terminal state of one item in a drop batch."""
    SKIPPED = "skipped"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class FileSystemEntry(BaseModel):
    """A path whose kind is looked up on every access."""
    path: Path = Field(..., description="Filesystem path")

    @property
    def kind(self) -> EntryKind:
        return entry_kind(self.path)

    @property
    def exists(self) -> bool:
        return self.kind != EntryKind.MISSING


class TransferRequest(BaseModel):
    """Copy or move of a single file-or-directory entry."""
    source: Path = Field(..., description="Entry to copy or move")
    destination: Path = Field(..., description="Full destination path")
    mode: TransferMode = Field(default=TransferMode.COPY, description="copy or move")
    overwrite: bool = Field(default=True, description="Replace existing destination files")


class ShortcutRequest(BaseModel):
    """Shortcut to a target, written into a folder."""
    target: Path = Field(..., description="Path the shortcut resolves to")
    folder: Optional[Path] = Field(default=None, description="Folder for the shortcut (target's parent if unset)")
    overwrite: bool = Field(default=True, description="Replace an existing shortcut")

    @property
    def destination_folder(self) -> Path:
        return self.folder if self.folder is not None else self.target.parent


class BatchItemOutcome(BaseModel):
    """Result of processing one dropped path."""
    model_config = ConfigDict(frozen=True)

    source: str = Field(..., description="Dropped path as received")
    status: OutcomeStatus = Field(..., description="skipped, succeeded or failed")
    destination: Optional[str] = Field(default=None, description="Computed destination path")
    reason: Optional[str] = Field(default=None, description="Why the item was skipped or failed")
    error_kind: Optional[ErrorKind] = Field(default=None, description="Failure category")

    @classmethod
    def skipped(cls, source: str, destination: Optional[str] = None, reason: str = "same location") -> "BatchItemOutcome":
        return cls(source=source, status=OutcomeStatus.SKIPPED, destination=destination, reason=reason)

    @classmethod
    def succeeded(cls, source: str, destination: Optional[str] = None) -> "BatchItemOutcome":
        return cls(source=source, status=OutcomeStatus.SUCCEEDED, destination=destination)

    @classmethod
    def failed(
        cls,
        source: str,
        reason: str,
        error_kind: ErrorKind,
        destination: Optional[str] = None
    ) -> "BatchItemOutcome":
        return cls(
            source=source,
            status=OutcomeStatus.FAILED,
            destination=destination,
            reason=reason,
            error_kind=error_kind
        )


class BatchResult(BaseModel):
    """Ordered outcomes of a drop batch."""
    outcomes: list[BatchItemOutcome] = Field(default_factory=list, description="One outcome per dropped path")

    def _count(self, status: OutcomeStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)

    @property
    def processed_count(self) -> int:
        """Number of items that succeeded. Skipped and failed items are not counted."""
        return self._count(OutcomeStatus.SUCCEEDED)

    @property
    def skipped_count(self) -> int:
        return self._count(OutcomeStatus.SKIPPED)

    @property
    def failed_count(self) -> int:
        return self._count(OutcomeStatus.FAILED)

    @property
    def failures(self) -> list[BatchItemOutcome]:
        return [o for o in self.outcomes if o.status == OutcomeStatus.FAILED]

    def to_dict(self) -> dict:
        """Convert result to dictionary for logging/display."""
        return {
            "processed_count": self.processed_count,
            "skipped_count": self.skipped_count,
            "failed_count": self.failed_count,
            "outcomes": [outcome.model_dump(mode="json") for outcome in self.outcomes],
        }
