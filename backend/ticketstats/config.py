from dataclasses import dataclass
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings


@dataclass(frozen=True)
class DateTimeFormats:
    """strptime patterns for the ticket date (dd.MM.yy) and time (H:mm) fields."""
    date_format: str = "%d.%m.%y"
    time_format: str = "%H:%M"


DEFAULT_FORMATS = DateTimeFormats()


class Settings(BaseSettings):
    route_origin: str = "VVO"
    route_destination: str = "TLV"

    date_format: str = DEFAULT_FORMATS.date_format
    time_format: str = DEFAULT_FORMATS.time_format

    tickets_path: str = "tickets.json"
    log_level: str = "INFO"

    @field_validator("route_origin", "route_destination")
    @classmethod
    def _route_code_not_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Route codes must not be empty")
        return value

    def formats(self) -> DateTimeFormats:
        return DateTimeFormats(date_format=self.date_format, time_format=self.time_format)

    class Config:
        env_prefix = "TICKETSTATS_"
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()
