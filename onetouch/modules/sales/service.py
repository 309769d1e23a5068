# onetouch/modules/sales/service.py
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Tuple
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from onetouch.core.exceptions import NotFoundError, InsufficientStockError, UnexpectedError
from onetouch.core.transaction import transaction
from .repository import SalesRepository
from .schemas import SaleCreateRequest, SaleResponse

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")

def calculate_sale_amounts(price, cost, quantity: int) -> Tuple[Decimal, Decimal]:
    """
    total = price × quantity, profit = (price − cost) × quantity, both with
    two fractional digits like the NUMERIC(10,2) columns that store them.
    """
    price = Decimal(str(price))
    cost = Decimal(str(cost))
    total = (price * quantity).quantize(CENTS, rounding=ROUND_HALF_UP)
    profit = ((price - cost) * quantity).quantize(CENTS, rounding=ROUND_HALF_UP)
    return total, profit

class SalesService:
    """
    Servicio de ventas: cada venta descuenta stock en la misma transacción
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = SalesRepository(db)

    # ==================== REGISTRO DE VENTAS ====================

    async def record_sale(self, sale_data: SaleCreateRequest) -> SaleResponse:
        """
        Registrar una venta

        1. Bloquear el producto (404 si no existe)
        2. Validar stock disponible (400 con disponible/solicitado)
        3. Calcular total y ganancia
        4. Insertar la venta con los datos del producto en este instante
        5. Descontar stock
        Cualquier fallo revierte todos los pasos.
        """
        with transaction(self.db, "Error recording sale"):
            product = self.repository.get_product_for_sale(sale_data.product_id)
            if not product:
                raise NotFoundError("Product not found")

            if product.quantity < sale_data.quantity:
                raise InsufficientStockError(
                    available=product.quantity,
                    requested=sale_data.quantity
                )

            total, profit = calculate_sale_amounts(
                product.price, product.cost, sale_data.quantity
            )

            sale = self.repository.create_sale(
                product=product,
                quantity=sale_data.quantity,
                total=total,
                profit=profit,
                customer=sale_data.customer,
                payment=sale_data.payment,
                notes=sale_data.notes
            )

            self.repository.decrease_product_stock(product.id, sale_data.quantity)

        self.db.refresh(sale)
        logger.info(f"Sale recorded: {sale.product_name} x {sale.quantity} (total={sale.total})")
        return SaleResponse.model_validate(sale)

    # ==================== CONSULTAS ====================

    async def list_sales(self) -> List[SaleResponse]:
        try:
            sales = self.repository.get_all_sales()
        except SQLAlchemyError as e:
            logger.exception("Error listing sales")
            raise UnexpectedError("Error fetching sales") from e

        return [SaleResponse.model_validate(s) for s in sales]
