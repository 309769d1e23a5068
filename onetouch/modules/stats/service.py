# onetouch/modules/stats/service.py
import logging
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from onetouch.core.exceptions import UnexpectedError
from .repository import StatsRepository
from .schemas import StatsResponse

logger = logging.getLogger(__name__)

class StatsService:

    def __init__(self, db: Session):
        self.db = db
        self.repository = StatsRepository(db)

    async def get_stats(self) -> StatsResponse:
        """
        Resumen del inventario y las ventas: productos, valor del stock,
        stock bajo, ventas, ingresos, ganancia y ventas de hoy
        """
        try:
            totals = self.repository.get_totals()
        except SQLAlchemyError as e:
            logger.exception("Error computing stats")
            raise UnexpectedError("Error fetching statistics") from e

        return StatsResponse(**{key: value or 0 for key, value in totals.items()})
