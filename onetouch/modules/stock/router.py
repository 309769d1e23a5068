# onetouch/modules/stock/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from onetouch.config.database import get_db
from .service import StockService
from .schemas import StockAddRequest, StockAddResponse

router = APIRouter(prefix="/stock", tags=["Stock"])

@router.post("/add", response_model=StockAddResponse)
async def add_stock(stock_data: StockAddRequest, db: Session = Depends(get_db)):
    """
    Registrar entrada de mercancía

    **Funcionalidad:**
    - Suma la cantidad al stock del producto
    - Deja un movimiento tipo ENTRADA con proveedor, costo y notas
    - 404 si el producto no existe
    """
    service = StockService(db)
    return await service.add_stock(stock_data)
