"""
Test fixtures for ticketstats tests.
"""
import json

import pytest
from httpx import AsyncClient, ASGITransport

from ticketstats.config import Settings, get_settings
from ticketstats.main import app
from ticketstats.schemas.ticket import TicketRecord


def make_ticket(**overrides) -> TicketRecord:
    fields = {
        "origin": "VVO",
        "origin_name": "Владивосток",
        "destination": "TLV",
        "destination_name": "Тель-Авив",
        "departure_date": "12.05.18",
        "departure_time": "16:20",
        "arrival_date": "12.05.18",
        "arrival_time": "22:10",
        "carrier": "TK",
        "stops": 3,
        "price": 12400,
    }
    fields.update(overrides)
    return TicketRecord(**fields)


SAMPLE_TICKETS = [
    {"origin": "VVO", "origin_name": "Владивосток", "destination": "TLV", "destination_name": "Тель-Авив",
     "departure_date": "12.05.18", "departure_time": "16:20", "arrival_date": "12.05.18",
     "arrival_time": "22:10", "carrier": "TK", "stops": 3, "price": 12400},
    {"origin": "VVO", "origin_name": "Владивосток", "destination": "TLV", "destination_name": "Тель-Авив",
     "departure_date": "12.05.18", "departure_time": "17:20", "arrival_date": "12.05.18",
     "arrival_time": "23:50", "carrier": "S7", "stops": 1, "price": 13100},
    {"origin": "VVO", "origin_name": "Владивосток", "destination": "TLV", "destination_name": "Тель-Авив",
     "departure_date": "12.05.18", "departure_time": "12:10", "arrival_date": "12.05.18",
     "arrival_time": "18:10", "carrier": "SU", "stops": 0, "price": 15300},
    {"origin": "vvo", "origin_name": "Владивосток", "destination": "tlv", "destination_name": "Тель-Авив",
     "departure_date": "12.05.18", "departure_time": "9:40", "arrival_date": "12.05.18",
     "arrival_time": "19:25", "carrier": "TK", "stops": 2, "price": 11000},
    {"origin": "LRN", "origin_name": "Ларнака", "destination": "TLV", "destination_name": "Тель-Авив",
     "departure_date": "12.05.18", "departure_time": "12:50", "arrival_date": "12.05.18",
     "arrival_time": "14:30", "carrier": "SU", "stops": 0, "price": 7000},
]


@pytest.fixture
def sample_tickets():
    return [TicketRecord(**t) for t in SAMPLE_TICKETS]


@pytest.fixture
def tickets_file(tmp_path):
    path = tmp_path / "tickets.json"
    path.write_text(json.dumps({"tickets": SAMPLE_TICKETS}, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def settings(tickets_file):
    return Settings(tickets_path=str(tickets_file))


@pytest.fixture(scope="function")
async def client(settings):
    """
    Async test client with the settings dependency pointed at a temp tickets file.
    """
    app.dependency_overrides[get_settings] = lambda: settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def ticket_factory():
    return make_ticket


@pytest.fixture
def ticket_payloads():
    return [dict(t) for t in SAMPLE_TICKETS]
