"""
Shortcut Creator for DeskDrop.

Creates shortcuts to dropped files and folders:
- Internet shortcuts (.url) are copied verbatim, since they are already
  plain-text redirects
- Everything else gets a platform shortcut written by a ShortcutBackend
"""

import os
import shutil
from pathlib import Path
from typing import Optional
import structlog

from deskdrop.config import Settings, get_settings
from deskdrop.errors import AlreadyExistsError, NotFoundError
from deskdrop.execution.shortcut_backends import ShortcutBackend, get_backend
from deskdrop.models import ShortcutRequest
from deskdrop.utils.path_utils import PathLike, exists, paths_equal


class ShortcutCreator:
    """Creates platform shortcuts and copies internet shortcuts."""

    def __init__(
        self,
        backend: Optional[ShortcutBackend] = None,
        settings: Optional[Settings] = None
    ):
        self.settings = settings or get_settings()
        self.backend = backend or get_backend(self.settings.shortcut_backend)
        self.logger = structlog.get_logger("shortcut_creator")

    def create(self, request: ShortcutRequest) -> Path:
        """Create the shortcut described by a ``ShortcutRequest``."""
        return self.create_shortcut(request.target, request.destination_folder, request.overwrite)

    def create_shortcut(
        self,
        target_path: PathLike,
        shortcut_folder: Optional[PathLike] = None,
        overwrite: bool = True
    ) -> Path:
        """
        Create a shortcut for a file or folder.

        Args:
            target_path: File or folder the shortcut resolves to
            shortcut_folder: Folder to create the shortcut in (None means the
                target's own folder)
            overwrite: Replace an existing shortcut at the computed path

        Returns:
            Full path of the created shortcut

        Raises:
            NotFoundError: If the target does not exist
            AlreadyExistsError: If the shortcut exists and overwrite is False,
                or the shortcut path is the target itself
            OSError: If the shortcut cannot be written
        """
        if not exists(target_path):
            raise NotFoundError(f"Shortcut target not found: {target_path}")

        target = Path(target_path)
        folder = Path(shortcut_folder) if shortcut_folder else target.parent

        if target.suffix.lower() == self.settings.internet_shortcut_suffix:
            return self._copy_internet_shortcut(target, folder, overwrite)

        shortcut_path = folder / (target.stem + self.backend.extension)

        # e.g. app.desktop dropped as a desktop entry into its own folder
        if paths_equal(shortcut_path, target):
            raise AlreadyExistsError(f"Shortcut would replace its own target: {target}")

        if shortcut_path.exists() or shortcut_path.is_symlink():
            if not overwrite:
                raise AlreadyExistsError(f"Shortcut already exists: {shortcut_path}")
            shortcut_path.unlink()

        result = self.backend.create_link(
            target,
            shortcut_path,
            working_dir=target.parent,
            description=target.name
        )

        if result.description_error is not None:
            self.logger.warning(
                "shortcut_description_failed",
                shortcut=str(result.path),
                error=str(result.description_error)
            )

        self.logger.info(
            "shortcut_created",
            target=str(target),
            shortcut=str(result.path),
            backend=self.backend.name
        )
        return result.path

    def _copy_internet_shortcut(self, target: Path, folder: Path, overwrite: bool) -> Path:
        destination = folder / target.name
        if not overwrite and os.path.lexists(destination):
            raise AlreadyExistsError(f"Shortcut already exists: {destination}")

        shutil.copy2(target, destination)

        self.logger.info(
            "internet_shortcut_copied",
            target=str(target),
            shortcut=str(destination)
        )
        return destination
