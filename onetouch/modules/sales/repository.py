# onetouch/modules/sales/repository.py
from decimal import Decimal
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import func, desc

from onetouch.shared.database.models import Sale, Product

class SalesRepository:
    """
    Repositorio para todas las operaciones de datos relacionadas con ventas
    """

    def __init__(self, db: Session):
        self.db = db

    # ==================== PRODUCTOS ====================

    def get_product_for_sale(self, product_id: int) -> Optional[Product]:
        """
        Obtener producto bloqueando la fila (SELECT ... FOR UPDATE) hasta el
        fin de la transacción
        """
        return self.db.query(Product)\
            .filter(Product.id == product_id)\
            .with_for_update()\
            .first()

    def decrease_product_stock(self, product_id: int, quantity: int) -> int:
        """Descontar stock en SQL sobre el valor actual de la fila"""
        return self.db.query(Product)\
            .filter(Product.id == product_id)\
            .update(
                {
                    Product.quantity: Product.quantity - quantity,
                    Product.updated_at: func.now()
                },
                synchronize_session=False
            )

    # ==================== VENTAS ====================

    def create_sale(
        self,
        product: Product,
        quantity: int,
        total: Decimal,
        profit: Decimal,
        customer: str,
        payment: str,
        notes: str
    ) -> Sale:
        """Crear venta copiando nombre, categoría, precio y costo del producto"""
        sale = Sale(
            product_id=product.id,
            product_name=product.name,
            category=product.category,
            quantity=quantity,
            price=product.price,
            cost=product.cost,
            total=total,
            profit=profit,
            customer=customer,
            payment=payment,
            notes=notes
        )
        self.db.add(sale)
        self.db.flush()
        return sale

    def get_all_sales(self) -> List[Sale]:
        return self.db.query(Sale)\
            .order_by(desc(Sale.sale_date), desc(Sale.id))\
            .all()
