from datetime import date, datetime, time, timedelta

from ticketstats.config import DEFAULT_FORMATS, DateTimeFormats
from ticketstats.exceptions import MalformedDateTimeError
from ticketstats.schemas.ticket import TicketRecord


def _parse_date(value: str, pattern: str) -> date:
    try:
        text = value.strip()
        parsed = datetime.strptime(text, pattern)
    except (ValueError, AttributeError):
        raise MalformedDateTimeError(value, pattern) from None
    # strptime accepts unpadded fields; dd.MM.yy does not
    if parsed.strftime(pattern) != text:
        raise MalformedDateTimeError(value, pattern)
    return parsed.date()


def _parse_time(value: str, pattern: str) -> time:
    try:
        text = value.strip()
        parsed = datetime.strptime(text, pattern)
    except (ValueError, AttributeError):
        raise MalformedDateTimeError(value, pattern) from None
    # H:mm allows a one-digit hour, minutes stay two digits
    if parsed.strftime(pattern) not in (text, "0" + text):
        raise MalformedDateTimeError(value, pattern)
    return parsed.time()


def parse_datetime(
    date_str: str,
    time_str: str,
    formats: DateTimeFormats = DEFAULT_FORMATS,
) -> datetime:
    """Combine a ticket date field and time field into one naive timestamp."""
    return datetime.combine(
        _parse_date(date_str, formats.date_format),
        _parse_time(time_str, formats.time_format),
    )


def flight_duration(ticket: TicketRecord, formats: DateTimeFormats = DEFAULT_FORMATS) -> timedelta:
    """
    Elapsed time between departure and arrival of a ticket.

    Overnight rollover: when the arrival time-of-day is earlier than the
    departure time-of-day and the arrival date was not advanced past the
    departure date, one day is added to the arrival timestamp. At most one
    day is ever added, so a flight whose arrival date field understates it
    by more than a day is reported short. Known limitation.
    """
    departure = parse_datetime(ticket.departure_date, ticket.departure_time, formats)
    arrival = parse_datetime(ticket.arrival_date, ticket.arrival_time, formats)

    if arrival.time() < departure.time() and arrival.date() <= departure.date():
        arrival += timedelta(days=1)

    return arrival - departure


def duration_minutes(duration: timedelta) -> int:
    return int(duration.total_seconds() // 60)


def format_duration(duration: timedelta) -> str:
    """Render as HH:MM, hours not wrapped at 24."""
    hours, minutes = divmod(duration_minutes(duration), 60)
    return f"{hours:02d}:{minutes:02d}"
