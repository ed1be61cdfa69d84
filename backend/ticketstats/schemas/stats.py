from pydantic import BaseModel
from typing import List, Optional

from ticketstats.schemas.ticket import TicketRecord


class RouteStatsRequest(BaseModel):
    origin: Optional[str] = None
    destination: Optional[str] = None
    tickets: List[TicketRecord]


class CarrierDuration(BaseModel):
    carrier: str
    duration_minutes: int
    duration: str  # HH:MM


class RouteStatsResponse(BaseModel):
    origin: str
    destination: str
    ticket_count: int
    price_difference: float
    carriers: List[CarrierDuration]
