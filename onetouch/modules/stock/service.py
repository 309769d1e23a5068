# onetouch/modules/stock/service.py
import logging
from sqlalchemy.orm import Session

from onetouch.core.exceptions import NotFoundError
from onetouch.core.transaction import transaction
from .repository import StockRepository
from .schemas import StockAddRequest, StockAddResponse, MovementType

logger = logging.getLogger(__name__)

class StockService:

    def __init__(self, db: Session):
        self.db = db
        self.repository = StockRepository(db)

    async def add_stock(self, stock_data: StockAddRequest) -> StockAddResponse:
        """
        Entrada de mercancía: suma stock y deja un movimiento ENTRADA, todo
        en una transacción. 404 si el producto no existe.
        """
        with transaction(self.db, "Error adding stock"):
            product = self.repository.get_product_for_update(stock_data.product_id)
            if not product:
                raise NotFoundError("Product not found")

            self.repository.increase_product_stock(product.id, stock_data.quantity)

            movement = self.repository.create_movement({
                "product_id": product.id,
                "quantity": stock_data.quantity,
                "type": MovementType.ENTRADA.value,
                "supplier": stock_data.supplier,
                "cost": stock_data.cost,
                "notes": stock_data.notes
            })
            movement_id = movement.id

        self.db.refresh(product)
        logger.info(f"Stock added to product {product.id}: +{stock_data.quantity} (now {product.quantity})")

        return StockAddResponse(
            success=True,
            message="Stock added successfully",
            product_id=product.id,
            quantity=stock_data.quantity,
            new_quantity=product.quantity,
            movement_id=movement_id
        )
