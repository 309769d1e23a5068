# onetouch/modules/stock/repository.py
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import func

from onetouch.shared.database.models import Product, StockMovement

class StockRepository:
    """
    Repositorio de entradas de inventario
    """

    def __init__(self, db: Session):
        self.db = db

    def get_product_for_update(self, product_id: int) -> Optional[Product]:
        return self.db.query(Product)\
            .filter(Product.id == product_id)\
            .with_for_update()\
            .first()

    def increase_product_stock(self, product_id: int, quantity: int) -> int:
        """Sumar stock en SQL sobre el valor actual de la fila"""
        return self.db.query(Product)\
            .filter(Product.id == product_id)\
            .update(
                {
                    Product.quantity: Product.quantity + quantity,
                    Product.updated_at: func.now()
                },
                synchronize_session=False
            )

    def create_movement(self, movement_data: dict) -> StockMovement:
        movement = StockMovement(**movement_data)
        self.db.add(movement)
        self.db.flush()
        return movement

