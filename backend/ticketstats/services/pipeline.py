import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Dict, Iterable, List

from ticketstats.config import DEFAULT_FORMATS, DateTimeFormats
from ticketstats.schemas.ticket import TicketRecord
from ticketstats.services.flight_duration import format_duration
from ticketstats.services.min_duration import min_duration_by_carrier
from ticketstats.services.price_statistics import summarize_prices
from ticketstats.services.route_filter import filter_by_route

logger = logging.getLogger(__name__)


@dataclass
class RouteReport:
    origin: str
    destination: str
    ticket_count: int
    price_difference: float
    carrier_durations: Dict[str, timedelta]

    def sorted_carriers(self) -> List[str]:
        return sorted(self.carrier_durations)


def build_route_report(
    tickets: Iterable[TicketRecord],
    origin: str,
    destination: str,
    formats: DateTimeFormats = DEFAULT_FORMATS,
) -> RouteReport:
    """
    Filter to one route, then compute per-carrier minimum flight time and
    the mean/median price difference over the same tickets.

    Errors from either computation propagate; no partial report is built.
    """
    route_tickets = filter_by_route(tickets, origin, destination)

    carrier_durations = min_duration_by_carrier(route_tickets, formats)
    prices = summarize_prices(route_tickets)

    logger.info(
        f"Route {origin.upper()}-{destination.upper()}: {len(route_tickets)} tickets, "
        f"{len(carrier_durations)} carriers"
    )
    return RouteReport(
        origin=origin.upper(),
        destination=destination.upper(),
        ticket_count=len(route_tickets),
        price_difference=prices.difference,
        carrier_durations=carrier_durations,
    )


def render_report_lines(report: RouteReport) -> List[str]:
    """Price difference first, then one ``CARRIER HH:MM`` line per carrier."""
    lines = [str(report.price_difference)]
    for carrier in report.sorted_carriers():
        lines.append(f"{carrier} {format_duration(report.carrier_durations[carrier])}")
    return lines
