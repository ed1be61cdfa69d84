from ticketstats.schemas.ticket import TicketRecord, TicketsFile
from ticketstats.schemas.stats import CarrierDuration, RouteStatsRequest, RouteStatsResponse

__all__ = ["TicketRecord", "TicketsFile", "CarrierDuration", "RouteStatsRequest", "RouteStatsResponse"]
