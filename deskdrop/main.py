"""
DeskDrop - command-line host.

Runs one drop batch from the command line:
    deskdrop copy a.txt photos/ --target ~/Desktop/Inbox
    deskdrop move report.pdf --target ~/Documents --into ~/Documents/2024
    deskdrop shortcut ~/Projects/app --target ~/Desktop
"""

import argparse
import json
import sys
from typing import Optional, Sequence

import structlog

from deskdrop.config import ShortcutBackendName, TransferMode, get_settings
from deskdrop.execution.batch_processor import DropBatchProcessor
from deskdrop.execution.shortcut_backends import get_backend
from deskdrop.execution.shortcut_creator import ShortcutCreator
from deskdrop.logging_config import configure_logging


logger = structlog.get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="deskdrop", description="DeskDrop file operations")
    parser.add_argument(
        "mode",
        choices=[m.value for m in TransferMode],
        help="Operation to apply to every source"
    )
    parser.add_argument("sources", nargs="+", help="Dropped files or folders")
    parser.add_argument("--target", "-t", required=True, help="Folder the items were dropped on")
    parser.add_argument("--into", "-i", default=None, help="Subfolder to drop into instead of the target")
    parser.add_argument(
        "--backend",
        choices=[b.value for b in ShortcutBackendName],
        default=None,
        help="Shortcut format (default: from settings)"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    settings = get_settings()
    configure_logging(settings)

    mode = TransferMode(args.mode)
    shortcut_creator = None
    if mode == TransferMode.SHORTCUT:
        backend = get_backend(args.backend or settings.shortcut_backend)
        shortcut_creator = ShortcutCreator(backend=backend, settings=settings)

    processor = DropBatchProcessor(shortcut_creator=shortcut_creator, settings=settings)

    logger.info("starting_batch", mode=mode.value, items=len(args.sources), target=args.target)
    result = processor.process_dropped_paths(
        args.sources,
        args.target,
        is_copy=mode == TransferMode.COPY,
        subfolder_override=args.into,
        as_shortcuts=mode == TransferMode.SHORTCUT
    )

    print(json.dumps(result.to_dict(), indent=2))
    return 0 if result.failed_count == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
