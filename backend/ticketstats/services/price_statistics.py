import logging
import statistics
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from ticketstats.exceptions import EmptyDataSetError
from ticketstats.schemas.ticket import TicketRecord

logger = logging.getLogger(__name__)


@dataclass
class PriceSummary:
    count: int
    mean: float
    median: float
    difference: float  # mean - median


def _require_prices(prices: Sequence[int]) -> None:
    if not prices:
        raise EmptyDataSetError("Cannot compute price statistics: no tickets matched")


def mean_price(prices: Sequence[int]) -> float:
    _require_prices(prices)
    return statistics.fmean(prices)


def median_price(prices: Sequence[int]) -> float:
    """
    Middle price of the sorted sequence.

    With an even count this is the average of the two middle prices, so
    [100, 200, 300, 400] gives 250.0. With an odd count the middle price is
    returned as-is.
    """
    _require_prices(prices)
    return statistics.median(prices)


def price_difference(prices: Sequence[int]) -> float:
    return mean_price(prices) - median_price(prices)


def ticket_prices(tickets: Iterable[TicketRecord]) -> List[int]:
    return [t.price for t in tickets]


def summarize_prices(tickets: Iterable[TicketRecord]) -> PriceSummary:
    """
    Mean, median and their difference over the ticket prices.

    Raises EmptyDataSetError when there are no tickets, so "no data" is never
    confused with a zero difference.
    """
    prices = ticket_prices(tickets)

    mean = mean_price(prices)
    median = median_price(prices)

    logger.debug(f"Price stats over {len(prices)} tickets: mean={mean:.2f} median={median}")
    return PriceSummary(
        count=len(prices),
        mean=mean,
        median=median,
        difference=mean - median,
    )
