from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime
from decimal import Decimal

from onetouch.shared.schemas import InventoryBaseModel

DEFAULT_MIN_STOCK = 5

# ==================== REQUEST SCHEMAS ====================

class ProductUpdateRequest(BaseModel):
    """Full-replace body: every field is stored as sent. Bounds are not checked."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Nombre del producto")
    category: str = Field(..., description="Categoría")
    quantity: int = Field(..., description="Stock actual")
    price: Decimal = Field(..., description="Precio unitario de venta")
    cost: Decimal = Field(..., description="Costo unitario")
    min_stock: Optional[int] = Field(None, alias="minStock", description="Umbral de stock bajo")
    notes: Optional[str] = Field("", description="Notas adicionales")

    @field_validator('notes')
    @classmethod
    def default_notes(cls, v: Optional[str]):
        return v or ""

class ProductCreateRequest(ProductUpdateRequest):
    min_stock: Optional[int] = Field(DEFAULT_MIN_STOCK, alias="minStock", description="Umbral de stock bajo")

    @field_validator('min_stock')
    @classmethod
    def default_min_stock(cls, v: Optional[int]):
        # 0 and null both fall back to the default threshold, only on create
        return v or DEFAULT_MIN_STOCK

# ==================== RESPONSE SCHEMAS ====================

class ProductResponse(InventoryBaseModel):
    id: int
    name: str
    category: str
    quantity: int
    price: float
    cost: float
    min_stock: Optional[int]
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime

class ProductDeleteResponse(BaseModel):
    success: bool = True
    message: str
    product: str
