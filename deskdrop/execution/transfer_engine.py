"""
Item Transfer Engine for DeskDrop.

Copies or moves a single file-or-directory entry:
- Directory copies walk the tree with an explicit worklist
- File copies preserve metadata
- Moves use the platform rename, with no copy+delete fallback
"""

import errno
import os
import shutil
import threading
from pathlib import Path
from typing import Optional
import structlog

from deskdrop.config import TransferMode
from deskdrop.errors import AlreadyExistsError, NotFoundError, OperationCancelledError
from deskdrop.models import TransferRequest
from deskdrop.utils.path_utils import EntryKind, PathLike, entry_kind


class ItemTransferEngine:
    """Copies and moves files and directory trees."""

    def __init__(self):
        self.logger = structlog.get_logger("transfer_engine")

    def execute(self, request: TransferRequest, cancel_event: Optional[threading.Event] = None) -> None:
        """Run a copy or move described by a ``TransferRequest``."""
        if request.mode == TransferMode.MOVE:
            self.move(request.source, request.destination, request.overwrite, cancel_event=cancel_event)
        elif request.mode == TransferMode.COPY:
            self.copy(request.source, request.destination, request.overwrite, cancel_event=cancel_event)
        else:
            raise ValueError(f"Unsupported transfer mode: {request.mode}")

    def copy(
        self,
        source: PathLike,
        destination: PathLike,
        overwrite: bool = True,
        recursive: bool = True,
        cancel_event: Optional[threading.Event] = None
    ) -> None:
        """
        Copy a file or a directory tree.

        Args:
            source: File or directory to copy
            destination: Full path of the copy
            overwrite: Replace destination files that already exist
            recursive: Descend into subdirectories (directory sources only)
            cancel_event: Checked before every file copy

        Raises:
            NotFoundError: If source is neither a file nor a directory
            AlreadyExistsError: If a destination file exists and overwrite is False
            OperationCancelledError: If cancel_event is set mid-copy
            OSError: On permission, disk-space or other I/O failures
        """
        kind = entry_kind(source)
        if kind == EntryKind.MISSING:
            raise NotFoundError(f"Source not found: {source}")

        check_cancelled(cancel_event)
        if kind == EntryKind.DIRECTORY:
            self.copy_directory(source, destination, recursive, overwrite, cancel_event)
        else:
            self._copy_file(Path(source), Path(destination), overwrite)

    def copy_directory(
        self,
        source_dir: PathLike,
        destination_dir: PathLike,
        recursive: bool = True,
        overwrite: bool = True,
        cancel_event: Optional[threading.Event] = None
    ) -> int:
        """
        Copy a directory, preserving the relative structure of its subtree.

        Directories are visited depth-first from a stack, so the depth of the
        tree never reaches the interpreter's recursion limit. Symlinked
        subdirectories are recreated as links instead of being descended.

        Returns:
            Number of files copied
        """
        source_dir = Path(source_dir)
        if not source_dir.is_dir():
            raise NotFoundError(
                f"Source directory does not exist or could not be found: {source_dir}"
            )

        resolved_src = source_dir.resolve()
        resolved_dst = Path(destination_dir).resolve()
        if resolved_dst == resolved_src or resolved_src in resolved_dst.parents:
            raise OSError(errno.EINVAL, "Cannot copy a directory into itself", str(destination_dir))

        copied = 0
        pending = [(source_dir, Path(destination_dir))]

        while pending:
            current_src, current_dst = pending.pop()
            current_dst.mkdir(parents=True, exist_ok=True)

            subdirs = []
            with os.scandir(current_src) as entries:
                for entry in sorted(entries, key=lambda e: e.name):
                    target = current_dst / entry.name
                    if entry.is_dir(follow_symlinks=False):
                        subdirs.append((Path(entry.path), target))
                    elif entry.is_symlink() and Path(entry.path).is_dir():
                        if recursive:
                            check_cancelled(cancel_event)
                            self._copy_link(Path(entry.path), target, overwrite)
                    elif entry.is_file():
                        check_cancelled(cancel_event)
                        self._copy_file(Path(entry.path), target, overwrite)
                        copied += 1

            if recursive:
                # Reversed so the stack pops siblings in name order
                pending.extend(reversed(subdirs))

        self.logger.debug(
            "directory_copied",
            source=str(source_dir),
            destination=str(destination_dir),
            files=copied
        )
        return copied

    def move(
        self,
        source: PathLike,
        destination: PathLike,
        overwrite: bool = True,
        cancel_event: Optional[threading.Event] = None
    ) -> None:
        """
        Move a file or directory with the platform's native rename.

        Moves across volumes or filesystems are not emulated with copy+delete;
        the ``OSError`` (typically ``EXDEV``) reaches the caller unchanged.

        Args:
            source: File or directory to move
            destination: Full destination path
            overwrite: Replace an existing destination file. An existing
                destination directory is only replaced if the platform
                rename allows it (empty target on POSIX).

        Raises:
            NotFoundError: If source is neither a file nor a directory
            AlreadyExistsError: If destination exists and overwrite is False
            OSError: If the rename fails
        """
        kind = entry_kind(source)
        if kind == EntryKind.MISSING:
            raise NotFoundError(f"Source not found: {source}")

        check_cancelled(cancel_event)
        destination = Path(destination)
        if not overwrite and (destination.exists() or destination.is_symlink()):
            raise AlreadyExistsError(f"Destination already exists: {destination}")

        if kind == EntryKind.DIRECTORY:
            os.rename(source, destination)
        else:
            os.replace(source, destination)

    def _copy_file(self, source: Path, destination: Path, overwrite: bool) -> None:
        if not overwrite and (destination.exists() or destination.is_symlink()):
            raise AlreadyExistsError(f"Destination already exists: {destination}")
        if destination.is_dir():
            raise IsADirectoryError(errno.EISDIR, "Destination is a directory", str(destination))

        # Copy file with metadata (shutil.copy2 preserves metadata)
        shutil.copy2(source, destination)

    def _copy_link(self, source: Path, destination: Path, overwrite: bool) -> None:
        if destination.is_symlink() or destination.exists():
            if not overwrite:
                raise AlreadyExistsError(f"Destination already exists: {destination}")
            if destination.is_symlink() or destination.is_file():
                destination.unlink()
        destination.symlink_to(os.readlink(source), target_is_directory=True)


def check_cancelled(cancel_event: Optional[threading.Event]) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise OperationCancelledError("Operation cancelled")
