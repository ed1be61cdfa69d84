from pydantic import BaseModel, Field
from typing import List, Optional


class TicketRecord(BaseModel):
    origin: str
    origin_name: Optional[str] = None
    destination: str
    destination_name: Optional[str] = None
    departure_date: str  # dd.MM.yy
    departure_time: str  # H:mm
    arrival_date: str
    arrival_time: str
    carrier: str
    stops: Optional[int] = Field(default=None, ge=0)
    price: int = Field(ge=0)

    class Config:
        frozen = True


class TicketsFile(BaseModel):
    tickets: List[TicketRecord]
