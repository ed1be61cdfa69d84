import json
import logging
from pathlib import Path
from typing import Any, List, Union

from pydantic import ValidationError

from ticketstats.exceptions import SourceUnavailableError
from ticketstats.schemas.ticket import TicketRecord, TicketsFile

logger = logging.getLogger(__name__)


def parse_tickets(payload: Any) -> List[TicketRecord]:
    """Validate an already-decoded ``{"tickets": [...]}`` document."""
    try:
        return TicketsFile.model_validate(payload).tickets
    except ValidationError as e:
        raise SourceUnavailableError(f"Not a valid tickets document: {e}") from e


def load_tickets(path: Union[str, Path]) -> List[TicketRecord]:
    """
    Read tickets from a JSON file, keeping file order.

    The file may start with a UTF-8 byte order mark.
    """
    path = Path(path)
    logger.info(f"Loading tickets from {path}")

    try:
        raw = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailableError(f"Cannot read tickets file {path}: {e}") from e

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise SourceUnavailableError(f"Tickets file {path} is not valid JSON: {e}") from e

    tickets = parse_tickets(payload)
    logger.info(f"Loaded {len(tickets)} tickets from {path}")
    return tickets
