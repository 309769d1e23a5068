from .router import router as stats_router
from .service import StatsService
from .repository import StatsRepository

__all__ = [
    "stats_router",
    "StatsService",
    "StatsRepository"
]
