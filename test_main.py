"""
Unit tests for the DeskDrop command-line host and settings.

Tests the CLI entry point, logging setup and environment configuration.
"""

import json
import logging
import sys
from pathlib import Path

import pytest
import structlog

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from deskdrop.config import LogFormat, Settings, ShortcutBackendName, reload_settings
from deskdrop.logging_config import configure_logging
from deskdrop.main import build_parser, main


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def desktop(temp_dir):
    desktop = temp_dir / "desktop"
    desktop.mkdir()
    (desktop / "todo.txt").write_text("ship it")
    return desktop


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep DESKDROP_* variables from the host out of the tests."""
    for key in [
        "DESKDROP_DEFAULT_OVERWRITE",
        "DESKDROP_SHORTCUT_BACKEND",
        "DESKDROP_INTERNET_SHORTCUT_EXTENSION",
        "DESKDROP_LOG_LEVEL",
        "DESKDROP_LOG_FORMAT",
        "DESKDROP_LOG_FILE",
    ]:
        monkeypatch.delenv(key, raising=False)
    yield
    monkeypatch.undo()
    reload_settings()
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


# ============================================================================
# Settings
# ============================================================================

class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.default_overwrite is True
        assert settings.shortcut_backend == ShortcutBackendName.AUTO
        assert settings.internet_shortcut_suffix == ".url"
        assert settings.log_format == LogFormat.CONSOLE

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DESKDROP_SHORTCUT_BACKEND", "url")
        monkeypatch.setenv("DESKDROP_DEFAULT_OVERWRITE", "false")
        monkeypatch.setenv("DESKDROP_INTERNET_SHORTCUT_EXTENSION", "WEBLOC")

        settings = Settings(_env_file=None)

        assert settings.shortcut_backend == ShortcutBackendName.URL
        assert settings.default_overwrite is False
        assert settings.internet_shortcut_suffix == ".webloc"

    def test_invalid_backend_rejected(self, monkeypatch):
        monkeypatch.setenv("DESKDROP_SHORTCUT_BACKEND", "carrier-pigeon")
        with pytest.raises(ValueError):
            Settings(_env_file=None)


# ============================================================================
# Logging
# ============================================================================

def test_configure_logging_writes_json_file(temp_dir):
    log_file = temp_dir / "deskdrop.log"
    settings = Settings(_env_file=None, log_format="json", log_file=str(log_file))

    configure_logging(settings)
    structlog.get_logger("test").info("hello_log", answer=42)

    line = log_file.read_text().strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "hello_log"
    assert record["answer"] == 42


# ============================================================================
# CLI
# ============================================================================

class TestCli:
    """Tests for the deskdrop command."""

    def test_parser_requires_target(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["copy", "a.txt"])

    def test_copy_prints_result(self, desktop, drop_target, capsys):
        exit_code = main(["copy", str(desktop / "todo.txt"), "--target", str(drop_target)])

        output = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert output["processed_count"] == 1
        assert (drop_target / "todo.txt").read_text() == "ship it"
        assert (desktop / "todo.txt").exists()

    def test_move_with_into(self, desktop, drop_target, capsys):
        inbox = drop_target / "inbox"
        inbox.mkdir()

        exit_code = main([
            "move", str(desktop / "todo.txt"),
            "--target", str(drop_target),
            "--into", str(inbox),
        ])

        assert exit_code == 0
        assert (inbox / "todo.txt").exists()
        assert not (desktop / "todo.txt").exists()

    def test_shortcut_with_backend(self, desktop, drop_target, capsys):
        exit_code = main([
            "shortcut", str(desktop / "todo.txt"),
            "--target", str(drop_target),
            "--backend", "url",
        ])

        assert exit_code == 0
        assert (drop_target / "todo.url").exists()

    def test_failures_set_exit_code(self, desktop, drop_target, capsys):
        exit_code = main([
            "copy", str(desktop / "todo.txt"), str(desktop / "gone.txt"),
            "--target", str(drop_target),
        ])

        output = json.loads(capsys.readouterr().out)
        assert exit_code == 1
        assert output["processed_count"] == 1
        assert output["failed_count"] == 1
