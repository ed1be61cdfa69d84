import logging
from typing import Iterable, Optional

from fastapi import APIRouter, Depends, HTTPException

from ticketstats.config import Settings, get_settings
from ticketstats.exceptions import EmptyDataSetError, MalformedDateTimeError, SourceUnavailableError
from ticketstats.schemas.stats import CarrierDuration, RouteStatsRequest, RouteStatsResponse
from ticketstats.schemas.ticket import TicketRecord
from ticketstats.services.flight_duration import duration_minutes, format_duration
from ticketstats.services.pipeline import RouteReport, build_route_report
from ticketstats.services.ticket_loader import load_tickets

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(report: RouteReport) -> RouteStatsResponse:
    return RouteStatsResponse(
        origin=report.origin,
        destination=report.destination,
        ticket_count=report.ticket_count,
        price_difference=report.price_difference,
        carriers=[
            CarrierDuration(
                carrier=carrier,
                duration_minutes=duration_minutes(report.carrier_durations[carrier]),
                duration=format_duration(report.carrier_durations[carrier]),
            )
            for carrier in report.sorted_carriers()
        ],
    )


def _route_stats(
    tickets: Iterable[TicketRecord],
    origin: Optional[str],
    destination: Optional[str],
    settings: Settings,
) -> RouteStatsResponse:
    origin = origin or settings.route_origin
    destination = destination or settings.route_destination
    try:
        report = build_route_report(tickets, origin, destination, settings.formats())
    except EmptyDataSetError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except MalformedDateTimeError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _to_response(report)


@router.post("/stats", response_model=RouteStatsResponse)
async def route_stats(body: RouteStatsRequest, settings: Settings = Depends(get_settings)):
    """Statistics over tickets posted in the request body."""
    return _route_stats(body.tickets, body.origin, body.destination, settings)


@router.get("/stats", response_model=RouteStatsResponse)
def route_stats_from_file(
    origin: Optional[str] = None,
    destination: Optional[str] = None,
    settings: Settings = Depends(get_settings),
):
    """Statistics over the configured tickets file."""
    try:
        tickets = load_tickets(settings.tickets_path)
    except SourceUnavailableError as e:
        logger.error(f"Tickets source unavailable: {e}")
        raise HTTPException(status_code=503, detail=str(e))
    return _route_stats(tickets, origin, destination, settings)
