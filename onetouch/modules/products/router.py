# onetouch/modules/products/router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from onetouch.config.database import get_db
from .service import ProductService
from .schemas import ProductCreateRequest, ProductUpdateRequest, ProductResponse, ProductDeleteResponse

router = APIRouter(prefix="/products", tags=["Products"])

# ==================== CONSULTAS ====================

@router.get("", response_model=List[ProductResponse])
async def list_products(db: Session = Depends(get_db)):
    """
    Listar todos los productos, ordenados por fecha de creación descendente
    """
    service = ProductService(db)
    return await service.list_products()

@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int, db: Session = Depends(get_db)):
    service = ProductService(db)
    return await service.get_product(product_id)

# ==================== ESCRITURA ====================

@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(product_data: ProductCreateRequest, db: Session = Depends(get_db)):
    """
    Crear producto

    - **minStock** opcional, por defecto 5
    - **notes** opcional
    """
    service = ProductService(db)
    return await service.create_product(product_data)

@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    product_data: ProductUpdateRequest,
    db: Session = Depends(get_db)
):
    """
    Reemplazo completo del producto
    """
    service = ProductService(db)
    return await service.update_product(product_id, product_data)

@router.delete("/{product_id}", response_model=ProductDeleteResponse)
async def delete_product(product_id: int, db: Session = Depends(get_db)):
    """
    Eliminar producto

    **Reglas:**
    - 404 si no existe
    - 400 si tiene ventas registradas
    - Sus movimientos de stock se eliminan junto con él
    """
    service = ProductService(db)
    return await service.delete_product(product_id)
