from __future__ import annotations

import argparse
import json
from typing import Sequence

from cashpot_attachments.bootstrap import build_store
from cashpot_attachments.config import SettingsManager
from cashpot_attachments.services import AttachmentDiagnostics, AttachmentStore
from cashpot_attachments.utils import LoggingOptions, configure_logging, get_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cashpot-attachments",
        description="Inspect or reset the local attachment metadata cache.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("stats", help="Summarise cached attachment listings")

    show = commands.add_parser("show", help="Print the cached listing for an entity")
    show.add_argument("entity_type")
    show.add_argument("entity_id", type=int)

    clear = commands.add_parser("clear", help="Drop the cached listing for an entity")
    clear.add_argument("entity_type")
    clear.add_argument("entity_id", type=int)

    commands.add_parser("clear-all", help="Drop every cached listing")
    return parser


def run(argv: Sequence[str] | None = None, *, store: AttachmentStore | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if store is None:
        settings = SettingsManager().load()
        configure_logging(LoggingOptions(level=settings.log_level))  # type: ignore[arg-type]
        store = build_store(settings)
    logger = get_logger(__name__)
    diagnostics = AttachmentDiagnostics(store)

    if args.command == "stats":
        stats = diagnostics.stats()
        print(
            json.dumps(
                {
                    "entities": stats.entities,
                    "files": stats.total_files,
                    "size": stats.display_size,
                    "by_type": stats.files_by_type,
                },
                indent=2,
            )
        )
    elif args.command == "show":
        attachments = store.use_entity_attachments(args.entity_type, args.entity_id)
        print(json.dumps([item.to_storage() for item in attachments], indent=2))
    elif args.command == "clear":
        store.clear_attachment_cache(args.entity_type, args.entity_id)
        logger.info(
            "Cleared cached attachments",
            entity_type=args.entity_type,
            entity_id=args.entity_id,
        )
    elif args.command == "clear-all":
        diagnostics.purge()
    return 0


def main() -> None:
    raise SystemExit(run())
