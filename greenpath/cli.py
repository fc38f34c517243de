"""greenpath CLI: build a trip package from the command line and print its totals."""

from __future__ import annotations

import argparse
import json
import sys

from dotenv import load_dotenv

from greenpath.config.settings import load_settings
from greenpath.domain.exceptions import DomainError
from greenpath.infrastructure.logging import get_logger
from greenpath.services.package_presenter import present_package, render_package
from greenpath.services.trip_service import TripSession

load_dotenv()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute an eco-trip package footprint, price and credits")
    parser.add_argument("--transport", default="", help="Transport option id, e.g. t2")
    parser.add_argument("--lodging", default="", help="Lodging option id, e.g. h1")
    parser.add_argument("--activity", action="append", default=[], help="Activity id to toggle (repeatable)")
    parser.add_argument("--challenge", action="append", default=[], help="Challenge id to join (repeatable)")
    parser.add_argument("--catalog", default="", help="Catalog JSON file (overrides GREENPATH_CATALOG_PATH)")
    parser.add_argument("--start-xp", type=int, default=None, help="Starting XP (overrides GREENPATH_START_XP)")
    parser.add_argument("--json", action="store_true", help="Print the display payload as JSON")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = load_settings()
    update: dict = {}
    if str(args.catalog).strip():
        update["catalog_path"] = str(args.catalog).strip()
    if args.start_xp is not None:
        update["start_xp"] = args.start_xp
    settings = settings.model_copy(update=update)
    logger = get_logger(enabled=settings.log_events)

    try:
        session = TripSession.from_settings(settings, logger=logger)
        if args.transport:
            session.select_transport(args.transport)
        if args.lodging:
            session.select_lodging(args.lodging)
        for activity_id in args.activity:
            session.toggle_activity(activity_id)
        for challenge_id in args.challenge:
            session.join_challenge(challenge_id)
    except DomainError as exc:
        logger.error("cli", str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(present_package(session), ensure_ascii=False, indent=2))
    else:
        print(render_package(session))
    logger.summary(**session.result.model_dump(), xp=session.progress.xp)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
