import argparse
import logging
import sys
from typing import List, Optional

from ticketstats.config import get_settings
from ticketstats.exceptions import EmptyDataSetError, MalformedDateTimeError, SourceUnavailableError
from ticketstats.services.pipeline import build_route_report, render_report_lines
from ticketstats.services.ticket_loader import load_tickets

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="ticketstats",
        description="Minimum flight time per carrier and mean/median price difference for one route.",
    )
    parser.add_argument("tickets_path", nargs="?", default=settings.tickets_path,
                        help="Path to tickets.json (default: %(default)s)")
    parser.add_argument("--origin", default=settings.route_origin)
    parser.add_argument("--destination", default=settings.route_destination)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    args = build_parser().parse_args(argv)

    try:
        tickets = load_tickets(args.tickets_path)
    except SourceUnavailableError as e:
        print(f"Tickets file not available: {e}", file=sys.stderr)
        return 1

    try:
        report = build_route_report(tickets, args.origin, args.destination, settings.formats())
    except (EmptyDataSetError, MalformedDateTimeError) as e:
        print(f"Cannot compute statistics: {e}", file=sys.stderr)
        return 2

    for line in render_report_lines(report):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
