from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from decimal import Decimal
from enum import Enum

# ==================== ENUMS ====================

class MovementType(str, Enum):
    ENTRADA = "ENTRADA"  # inbound

# ==================== REQUEST SCHEMAS ====================

class StockAddRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(..., alias="productId", description="ID del producto")
    quantity: int = Field(..., gt=0, description="Unidades recibidas")
    supplier: Optional[str] = Field("", description="Proveedor")
    cost: Optional[Decimal] = Field(Decimal("0"), description="Costo de la entrada")
    notes: Optional[str] = Field("", description="Notas adicionales")

    @field_validator('supplier', 'notes')
    @classmethod
    def default_empty_text(cls, v: Optional[str]):
        return v or ""

    @field_validator('cost')
    @classmethod
    def default_cost(cls, v: Optional[Decimal]):
        return v or Decimal("0")

# ==================== RESPONSE SCHEMAS ====================

class StockAddResponse(BaseModel):
    success: bool = True
    message: str
    product_id: int
    quantity: int
    new_quantity: int
    movement_id: int
