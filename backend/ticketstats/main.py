from fastapi import FastAPI
import logging

from ticketstats import __version__
from ticketstats.api import health, stats
from ticketstats.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="Ticket Stats",
    description="Per-route flight ticket statistics",
    version=__version__,
)

app.include_router(health.router, tags=["health"])
app.include_router(stats.router, prefix="/api", tags=["stats"])


@app.get("/ping")
async def ping():
    """Simple ping endpoint for health checks."""
    return {"status": "ok"}
