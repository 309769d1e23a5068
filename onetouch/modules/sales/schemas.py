from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime

from onetouch.shared.schemas import InventoryBaseModel

DEFAULT_CUSTOMER = "General Customer"
DEFAULT_PAYMENT = "Cash"

# ==================== REQUEST SCHEMAS ====================

class SaleCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(..., alias="productId", description="ID del producto vendido")
    quantity: int = Field(..., gt=0, description="Cantidad vendida")
    customer: Optional[str] = Field(DEFAULT_CUSTOMER, description="Nombre del cliente")
    payment: Optional[str] = Field(DEFAULT_PAYMENT, description="Método de pago")
    notes: Optional[str] = Field("", description="Notas adicionales")

    @field_validator('customer')
    @classmethod
    def default_customer(cls, v: Optional[str]):
        return v or DEFAULT_CUSTOMER

    @field_validator('payment')
    @classmethod
    def default_payment(cls, v: Optional[str]):
        return v or DEFAULT_PAYMENT

    @field_validator('notes')
    @classmethod
    def default_notes(cls, v: Optional[str]):
        return v or ""

# ==================== RESPONSE SCHEMAS ====================

class SaleResponse(InventoryBaseModel):
    id: int
    product_id: int
    product_name: str
    category: str
    quantity: int
    price: float
    cost: float
    total: float
    profit: float
    customer: Optional[str]
    payment: Optional[str]
    notes: Optional[str]
    sale_date: datetime
