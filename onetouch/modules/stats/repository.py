# onetouch/modules/stats/repository.py
from typing import Any, Dict
from sqlalchemy.orm import Session
from sqlalchemy import and_, func

from onetouch.shared.database.models import Product, Sale

class StatsRepository:
    """
    Agregados de solo lectura sobre productos y ventas
    """

    def __init__(self, db: Session):
        self.db = db

    def get_totals(self) -> Dict[str, Any]:
        """Todos los contadores en una sola consulta; las sumas vacías valen 0"""

        def scalar(*columns, where=None):
            query = self.db.query(*columns)
            if where is not None:
                query = query.filter(where)
            return query.scalar_subquery()

        row = self.db.query(
            scalar(func.count(Product.id)).label("total_products"),
            scalar(func.coalesce(func.sum(Product.quantity * Product.price), 0)).label("total_value"),
            scalar(
                func.count(Product.id),
                where=and_(Product.quantity > 0, Product.quantity <= Product.min_stock)
            ).label("low_stock"),
            scalar(func.count(Sale.id)).label("total_sales"),
            scalar(func.coalesce(func.sum(Sale.total), 0)).label("total_revenue"),
            scalar(func.coalesce(func.sum(Sale.profit), 0)).label("total_profit"),
            scalar(
                func.count(Sale.id),
                where=func.date(Sale.sale_date) == func.current_date()
            ).label("today_sales"),
        ).one()

        return dict(row._mapping)
