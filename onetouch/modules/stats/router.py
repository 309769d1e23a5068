# onetouch/modules/stats/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from onetouch.config.database import get_db
from .service import StatsService
from .schemas import StatsResponse

router = APIRouter(prefix="/stats", tags=["Stats"])

@router.get("", response_model=StatsResponse)
async def get_stats(db: Session = Depends(get_db)):
    """
    Estadísticas generales

    - **low_stock**: productos con 0 < cantidad <= min_stock
    - **today_sales**: ventas con fecha de hoy según el servidor de base de datos
    """
    service = StatsService(db)
    return await service.get_stats()
