"""
Shortcut backends for DeskDrop.

Each backend writes one kind of shortcut file:
- .lnk shell links (Windows, through WScript.Shell)
- .desktop entries (Linux desktop entries)
- .url files (cross-platform Internet Shortcut format)

Setting the human-readable description is optional. A backend that cannot
apply it reports the failure in ``LinkResult.description_error`` and still
writes the shortcut.
"""

import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from deskdrop.config import ShortcutBackendName
from deskdrop.errors import PlatformLinkError


class LinkResult(BaseModel):
    """What a backend wrote."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    path: Path = Field(..., description="Written shortcut file")
    description_applied: bool = Field(default=False, description="Description stored in the shortcut")
    description_error: Optional[PlatformLinkError] = Field(
        default=None,
        description="Why the description could not be stored"
    )


def _escape_desktop_value(value: str) -> str:
    """Escape a desktop entry string value so it stays on one line."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    # Any other control character has no escape sequence
    return "".join(ch for ch in escaped if ch >= " " and ch != "\x7f")


class ShortcutBackend(ABC):
    """Capability interface for writing a platform shortcut."""

    name: str = ""
    extension: str = ""

    @abstractmethod
    def create_link(
        self,
        target: Path,
        destination_path: Path,
        working_dir: Path,
        description: Optional[str] = None
    ) -> LinkResult:
        """
        Write a shortcut at ``destination_path`` resolving to ``target``.

        Args:
            target: Path the shortcut points at
            destination_path: Full path of the shortcut file
            working_dir: Working directory recorded in the shortcut
            description: Optional human-readable description

        Returns:
            LinkResult describing the written shortcut

        Raises:
            OSError: If the shortcut cannot be written
        """


class ShellLinkBackend(ShortcutBackend):
    """Windows .lnk shortcuts through the WScript.Shell COM object."""

    name = ShortcutBackendName.SHELL_LINK.value
    extension = ".lnk"

    def __init__(self, shell=None, link_errors: tuple = ()):
        self._shell = shell
        self._link_errors = tuple(link_errors)

    def _get_shell(self):
        if self._shell is None:
            import pywintypes
            import win32com.client

            self._shell = win32com.client.Dispatch("WScript.Shell")
            self._link_errors = self._link_errors + (pywintypes.com_error,)
        return self._shell

    def create_link(
        self,
        target: Path,
        destination_path: Path,
        working_dir: Path,
        description: Optional[str] = None
    ) -> LinkResult:
        shell = self._get_shell()
        shortcut = shell.CreateShortcut(str(destination_path))
        shortcut.TargetPath = str(target)
        shortcut.WorkingDirectory = str(working_dir)

        description_error = None
        if description is not None:
            description_error = self._apply_description(shortcut, description)

        try:
            shortcut.Save()
        except self._link_errors as e:
            raise OSError(f"Could not write shortcut {destination_path}: {e}") from e

        return LinkResult(
            path=destination_path,
            description_applied=description is not None and description_error is None,
            description_error=description_error
        )

    def _apply_description(self, shortcut, description: str) -> Optional[PlatformLinkError]:
        """Set the description; a COM failure is returned, not raised."""
        try:
            shortcut.Description = description
        except self._link_errors as e:
            return PlatformLinkError(f"Could not set shortcut description: {e}")
        return None


class DesktopEntryBackend(ShortcutBackend):
    """
    Linux desktop entry of type Link.

    Format:
    [Desktop Entry]
    Type=Link
    Name=filename
    URL=file:///path/to/target
    """

    name = ShortcutBackendName.DESKTOP.value
    extension = ".desktop"

    def create_link(
        self,
        target: Path,
        destination_path: Path,
        working_dir: Path,
        description: Optional[str] = None
    ) -> LinkResult:
        lines = [
            "[Desktop Entry]",
            "Type=Link",
            f"Name={_escape_desktop_value(target.name)}",
            f"URL={target.absolute().as_uri()}",
        ]
        if description is not None:
            lines.append(f"Comment={_escape_desktop_value(description)}")
        destination_path.write_text("\n".join(lines) + "\n", encoding='utf-8')

        # File managers only trust executable launchers
        destination_path.chmod(0o755)

        return LinkResult(path=destination_path, description_applied=description is not None)


class InternetShortcutBackend(ShortcutBackend):
    """
    Plain-text Internet Shortcut, readable on any platform.

    Format:
    [InternetShortcut]
    URL=file:///path/to/target
    WorkingDirectory=/path/to
    """

    name = ShortcutBackendName.URL.value
    extension = ".url"

    def create_link(
        self,
        target: Path,
        destination_path: Path,
        working_dir: Path,
        description: Optional[str] = None
    ) -> LinkResult:
        content = (
            "[InternetShortcut]\n"
            f"URL={target.absolute().as_uri()}\n"
            f"WorkingDirectory={working_dir}\n"
        )
        destination_path.write_text(content, encoding='utf-8')

        # The format has no description field
        return LinkResult(path=destination_path)


_BACKENDS = {
    ShortcutBackendName.SHELL_LINK: ShellLinkBackend,
    ShortcutBackendName.DESKTOP: DesktopEntryBackend,
    ShortcutBackendName.URL: InternetShortcutBackend,
}


def get_backend(
    name: Union[str, ShortcutBackendName] = ShortcutBackendName.AUTO,
    platform: Optional[str] = None
) -> ShortcutBackend:
    """
    Build the shortcut backend for a name, or for the platform when ``auto``.

    Args:
        name: Backend name ('auto', 'shell_link', 'desktop', 'url')
        platform: Platform string to use instead of ``sys.platform``

    Returns:
        A new backend instance

    Raises:
        ValueError: If the name is unknown
    """
    backend_name = ShortcutBackendName(name)
    if backend_name == ShortcutBackendName.AUTO:
        platform = platform or sys.platform
        if platform == "win32":
            backend_name = ShortcutBackendName.SHELL_LINK
        elif platform.startswith("linux"):
            backend_name = ShortcutBackendName.DESKTOP
        else:
            backend_name = ShortcutBackendName.URL
    return _BACKENDS[backend_name]()
