# onetouch/modules/products/__init__.py
"""
Módulo de Productos

CRUD del inventario:

- Listado y consulta por ID
- Creación y reemplazo completo
- Borrado protegido: bloqueado si hay ventas, arrastra los movimientos de stock

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Lógica de negocio
- repository.py: Acceso a datos
- schemas.py: Modelos Pydantic de request/response
"""

from .router import router as products_router
from .service import ProductService
from .repository import ProductRepository

__all__ = [
    "products_router",
    "ProductService",
    "ProductRepository"
]
