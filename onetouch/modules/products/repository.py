# onetouch/modules/products/repository.py
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import func, desc

from onetouch.shared.database.models import Product, Sale, StockMovement

class ProductRepository:
    """
    Repositorio para las operaciones de datos de productos
    """

    def __init__(self, db: Session):
        self.db = db

    # ==================== CONSULTAS ====================

    def get_all(self) -> List[Product]:
        """Todos los productos, los más recientes primero"""
        return self.db.query(Product)\
            .order_by(desc(Product.created_at), desc(Product.id))\
            .all()

    def get_by_id(self, product_id: int, for_update: bool = False) -> Optional[Product]:
        """
        Obtener producto por ID

        With `for_update` the row stays locked until the current transaction
        ends, which serializes concurrent sales of the same product.
        """
        query = self.db.query(Product).filter(Product.id == product_id)
        if for_update:
            query = query.with_for_update()
        return query.first()

    def count_sales(self, product_id: int) -> int:
        return self.db.query(func.count(Sale.id))\
            .filter(Sale.product_id == product_id)\
            .scalar() or 0

    # ==================== ESCRITURA ====================

    def create(self, product_data: dict) -> Product:
        """Insert without committing; the caller owns the transaction"""
        db_product = Product(**product_data)
        self.db.add(db_product)
        self.db.flush()
        return db_product

    def update(self, product: Product, product_data: dict) -> Product:
        for key, value in product_data.items():
            setattr(product, key, value)
        # always written, so a PUT with unchanged values still bumps the timestamp
        product.updated_at = func.now()
        self.db.flush()
        return product

    def delete_stock_movements(self, product_id: int) -> int:
        """Borrar movimientos de stock del producto; devuelve cuántos"""
        return self.db.query(StockMovement)\
            .filter(StockMovement.product_id == product_id)\
            .delete(synchronize_session=False)

    def delete(self, product: Product) -> None:
        self.db.delete(product)
        self.db.flush()

