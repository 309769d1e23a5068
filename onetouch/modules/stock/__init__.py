# onetouch/modules/stock/__init__.py
"""
Módulo de Stock - Entradas de inventario

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Lógica de negocio
- repository.py: Acceso a datos
- schemas.py: Modelos Pydantic de request/response
"""

from .router import router as stock_router
from .service import StockService
from .repository import StockRepository

__all__ = [
    "stock_router",
    "StockService",
    "StockRepository"
]
