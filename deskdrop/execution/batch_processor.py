"""
Drop Batch Processor for DeskDrop.

Processes every path delivered by one drag-and-drop gesture:
1. Computes each item's destination
2. Skips items already in the destination folder
3. Copies, moves or creates a shortcut
4. Records one outcome per item, carrying on past failures
"""

import os
import threading
from pathlib import Path
from typing import Iterable, Optional
import structlog

from deskdrop.config import Settings, TransferMode, get_settings
from deskdrop.errors import ErrorKind, classify_error
from deskdrop.execution.shortcut_creator import ShortcutCreator
from deskdrop.execution.transfer_engine import ItemTransferEngine, check_cancelled
from deskdrop.models import BatchItemOutcome, BatchResult, TransferRequest
from deskdrop.utils.path_utils import PathLike, paths_equal


class DropBatchProcessor:
    """
    Applies a drop batch against the transfer engine and shortcut creator.

    Items are independent: a batch may finish partially applied, and a failed
    item never stops the ones after it.
    """

    def __init__(
        self,
        transfer_engine: Optional[ItemTransferEngine] = None,
        shortcut_creator: Optional[ShortcutCreator] = None,
        settings: Optional[Settings] = None
    ):
        self.settings = settings or get_settings()
        self.transfer_engine = transfer_engine or ItemTransferEngine()
        self._shortcut_creator = shortcut_creator
        self.logger = structlog.get_logger("batch_processor")

    @property
    def shortcut_creator(self) -> ShortcutCreator:
        """Lazy-load the shortcut creator (and its platform backend)."""
        if self._shortcut_creator is None:
            self._shortcut_creator = ShortcutCreator(settings=self.settings)
        return self._shortcut_creator

    def process_dropped_paths(
        self,
        paths: Iterable[PathLike],
        target_folder: PathLike,
        is_copy: bool,
        subfolder_override: Optional[PathLike] = None,
        as_shortcuts: bool = False,
        cancel_event: Optional[threading.Event] = None
    ) -> BatchResult:
        """
        Process dropped paths into a target folder.

        Args:
            paths: Dropped source paths, in drop order
            target_folder: Folder the items were dropped on
            is_copy: Copy when True, move when False
            subfolder_override: Subfolder the items were dropped into, used
                instead of target_folder when set
            as_shortcuts: Create shortcuts instead of copying or moving
            cancel_event: When set, remaining items fail as cancelled

        Returns:
            BatchResult with one outcome per path. Never raises for
            per-item failures.
        """
        destination_folder = Path(subfolder_override or target_folder)
        if as_shortcuts:
            mode = TransferMode.SHORTCUT
        else:
            mode = TransferMode.COPY if is_copy else TransferMode.MOVE

        result = BatchResult()
        for source in paths:
            raw_source = os.fspath(source) if source is not None else ""
            outcome = self._process_item(raw_source, destination_folder, mode, cancel_event)
            result.outcomes.append(outcome)

        self.logger.info(
            "batch_complete",
            mode=mode.value,
            destination=str(destination_folder),
            processed=result.processed_count,
            skipped=result.skipped_count,
            failed=result.failed_count
        )
        return result

    def _process_item(
        self,
        source: str,
        destination_folder: Path,
        mode: TransferMode,
        cancel_event: Optional[threading.Event]
    ) -> BatchItemOutcome:
        if not source:
            self.logger.warning("item_failed", source=source, error_kind=ErrorKind.NOT_FOUND.value)
            return BatchItemOutcome.failed(source, "Source path is empty", ErrorKind.NOT_FOUND)

        source_path = Path(source)
        destination_path = destination_folder / source_path.name

        if mode != TransferMode.SHORTCUT and paths_equal(source_path.parent, destination_folder):
            self.logger.info("item_skipped", source=source, reason="same_location")
            return BatchItemOutcome.skipped(source, str(destination_path))

        try:
            if mode == TransferMode.SHORTCUT:
                check_cancelled(cancel_event)
                destination_path = self.shortcut_creator.create_shortcut(
                    source, destination_folder, overwrite=self.settings.default_overwrite
                )
            else:
                self.transfer_engine.execute(
                    TransferRequest(
                        source=source_path,
                        destination=destination_path,
                        mode=mode,
                        overwrite=self.settings.default_overwrite
                    ),
                    cancel_event=cancel_event
                )
        except Exception as e:
            kind = classify_error(e)
            self.logger.warning(
                "item_failed",
                source=source,
                destination=str(destination_path),
                mode=mode.value,
                error_kind=kind.value,
                error=str(e)
            )
            return BatchItemOutcome.failed(source, str(e), kind, str(destination_path))

        self.logger.info(
            "item_processed",
            source=source,
            destination=str(destination_path),
            mode=mode.value
        )
        return BatchItemOutcome.succeeded(source, str(destination_path))


def process_dropped_paths(
    paths: Iterable[PathLike],
    target_folder: PathLike,
    is_copy: bool,
    subfolder_override: Optional[PathLike] = None,
    as_shortcuts: bool = False,
    cancel_event: Optional[threading.Event] = None
) -> BatchResult:
    """Process a drop batch with a default ``DropBatchProcessor``."""
    return DropBatchProcessor().process_dropped_paths(
        paths,
        target_folder,
        is_copy,
        subfolder_override=subfolder_override,
        as_shortcuts=as_shortcuts,
        cancel_event=cancel_event
    )
