class TicketStatsError(Exception):
    """Base class for errors raised while computing route statistics."""


class MalformedDateTimeError(TicketStatsError, ValueError):
    def __init__(self, value: str, pattern: str):
        self.value = value
        self.pattern = pattern
        super().__init__(f"{value!r} does not match pattern {pattern!r}")


class EmptyDataSetError(TicketStatsError):
    """No tickets matched, so no mean or median can be computed."""


class SourceUnavailableError(TicketStatsError):
    """The tickets file is missing, unreadable or not a tickets document."""
