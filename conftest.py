"""
Shared pytest fixtures for DeskDrop tests.

Provides settings, temp directories, sample file trees and shortcut
backends across all test modules.
"""

import sys
import tempfile
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from deskdrop.execution.shortcut_backends import InternetShortcutBackend


# -------------------------------------------------------------------------
# Settings Fixtures
# -------------------------------------------------------------------------

@pytest.fixture
def test_settings():
    """
    Provide test configuration settings.

    Returns a mock Settings object with default test values.
    """
    class MockSettings:
        # File operations
        default_overwrite = True

        # Shortcuts
        shortcut_backend = "url"
        internet_shortcut_extension = ".url"
        internet_shortcut_suffix = ".url"

        # Logging
        log_level = "DEBUG"
        log_format = "console"
        log_file = None

    return MockSettings()


# -------------------------------------------------------------------------
# Temporary Directory Fixtures
# -------------------------------------------------------------------------

@pytest.fixture
def temp_dir():
    """
    Provide a temporary directory for test files.

    Creates a temporary directory that is automatically cleaned up after the test.
    Returns a pathlib.Path object.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_tree(temp_dir):
    """
    Provide a small directory tree to copy and move.

    Layout:
        source/
            readme.txt
            data.bin
            docs/
                guide.md
                deep/
                    notes.txt
            empty/
    """
    root = temp_dir / "source"
    (root / "docs" / "deep").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "readme.txt").write_text("Read me first")
    (root / "data.bin").write_bytes(bytes(range(256)))
    (root / "docs" / "guide.md").write_text("# Guide\n")
    (root / "docs" / "deep" / "notes.txt").write_text("deep notes")
    return root


@pytest.fixture
def drop_target(temp_dir):
    """Provide an empty folder to drop items on."""
    target = temp_dir / "target"
    target.mkdir()
    return target


# -------------------------------------------------------------------------
# Shortcut Fixtures
# -------------------------------------------------------------------------

@pytest.fixture
def url_backend():
    """Provide the plain-text internet shortcut backend."""
    return InternetShortcutBackend()


# -------------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------------

def tree_snapshot(root: Path) -> dict:
    """Map every relative path under root to file bytes (None for directories)."""
    snapshot = {}
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root).as_posix()
        snapshot[rel] = path.read_bytes() if path.is_file() else None
    return snapshot


@pytest.fixture
def snapshot():
    """Provide the tree_snapshot helper to tests."""
    return tree_snapshot
