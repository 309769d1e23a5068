# onetouch/modules/sales/router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from onetouch.config.database import get_db
from .service import SalesService
from .schemas import SaleCreateRequest, SaleResponse

router = APIRouter(prefix="/sales", tags=["Sales"])

@router.get("", response_model=List[SaleResponse])
async def list_sales(db: Session = Depends(get_db)):
    """
    Historial de ventas, las más recientes primero
    """
    service = SalesService(db)
    return await service.list_sales()

@router.post("", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
async def create_sale(sale_data: SaleCreateRequest, db: Session = Depends(get_db)):
    """
    Registrar venta

    Incluye:
    - Verificación de stock (400 "Insufficient stock" con available/requested)
    - Total y ganancia calculados con el precio y costo actuales del producto
    - Descuento de inventario en la misma transacción
    """
    service = SalesService(db)
    return await service.record_sale(sale_data)
