import logging
from typing import Iterable, List

from ticketstats.schemas.ticket import TicketRecord

logger = logging.getLogger(__name__)


def filter_by_route(
    tickets: Iterable[TicketRecord],
    origin: str,
    destination: str,
) -> List[TicketRecord]:
    """
    Keep the tickets flying origin -> destination, in input order.

    Airport codes are compared case-insensitively. An empty result is not an
    error; callers that need at least one ticket decide what to do with it.
    """
    origin_key = origin.casefold()
    destination_key = destination.casefold()

    matched = [
        t for t in tickets
        if t.origin.casefold() == origin_key and t.destination.casefold() == destination_key
    ]

    logger.debug(f"{len(matched)} tickets matched route {origin.upper()}-{destination.upper()}")
    return matched
