import logging
from datetime import timedelta
from typing import Dict, Iterable

from ticketstats.config import DEFAULT_FORMATS, DateTimeFormats
from ticketstats.schemas.ticket import TicketRecord
from ticketstats.services.flight_duration import flight_duration

logger = logging.getLogger(__name__)


def min_duration_by_carrier(
    tickets: Iterable[TicketRecord],
    formats: DateTimeFormats = DEFAULT_FORMATS,
) -> Dict[str, timedelta]:
    """
    Shortest flight time for every carrier present in ``tickets``.

    Carriers are grouped by exact string match. Iteration order of the result
    is not meaningful. A malformed date or time on any ticket propagates as
    MalformedDateTimeError.
    """
    shortest: Dict[str, timedelta] = {}

    for ticket in tickets:
        duration = flight_duration(ticket, formats)
        current = shortest.get(ticket.carrier)
        if current is None or duration < current:
            shortest[ticket.carrier] = duration

    logger.debug(f"Computed minimum flight time for {len(shortest)} carriers")
    return shortest
