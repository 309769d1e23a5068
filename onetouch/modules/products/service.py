# onetouch/modules/products/service.py
import logging
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from onetouch.core.exceptions import NotFoundError, ConflictError, UnexpectedError
from onetouch.core.transaction import transaction
from .repository import ProductRepository
from .schemas import ProductCreateRequest, ProductUpdateRequest, ProductResponse, ProductDeleteResponse

logger = logging.getLogger(__name__)

class ProductService:
    """
    CRUD de productos con la regla de borrado: un producto con ventas no se elimina
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = ProductRepository(db)

    # ==================== CONSULTAS ====================

    async def list_products(self) -> List[ProductResponse]:
        try:
            products = self.repository.get_all()
        except SQLAlchemyError as e:
            logger.exception("Error listing products")
            raise UnexpectedError("Error fetching products") from e

        logger.info(f"Products fetched: {len(products)}")
        return [ProductResponse.model_validate(p) for p in products]

    async def get_product(self, product_id: int) -> ProductResponse:
        try:
            product = self.repository.get_by_id(product_id)
        except SQLAlchemyError as e:
            logger.exception(f"Error fetching product {product_id}")
            raise UnexpectedError("Error fetching product") from e

        if not product:
            raise NotFoundError("Product not found")
        return ProductResponse.model_validate(product)

    # ==================== ESCRITURA ====================

    async def create_product(self, product_data: ProductCreateRequest) -> ProductResponse:
        with transaction(self.db, "Error creating product"):
            product = self.repository.create(product_data.model_dump())

        self.db.refresh(product)
        logger.info(f"Product created: {product.name} (id={product.id})")
        return ProductResponse.model_validate(product)

    async def update_product(self, product_id: int, product_data: ProductUpdateRequest) -> ProductResponse:
        """Reemplazo completo de todos los campos editables"""
        with transaction(self.db, "Error updating product"):
            product = self.repository.get_by_id(product_id, for_update=True)
            if not product:
                raise NotFoundError("Product not found")
            self.repository.update(product, product_data.model_dump())

        self.db.refresh(product)
        logger.info(f"Product updated: {product.name} (id={product.id})")
        return ProductResponse.model_validate(product)

    async def delete_product(self, product_id: int) -> ProductDeleteResponse:
        """
        Delete a product that has never been sold.

        Sales keep a foreign key to their product, so any registered sale
        blocks the deletion with a ConflictError. Stock movements belong to
        the product and are removed in the same transaction.
        """
        with transaction(self.db, "Error deleting product", expose_details=True):
            product = self.repository.get_by_id(product_id, for_update=True)
            if not product:
                raise NotFoundError("Product not found")

            product_name = product.name
            sales_count = self.repository.count_sales(product_id)
            if sales_count > 0:
                raise ConflictError(
                    f'Cannot delete "{product_name}" because it has {sales_count} registered sales.'
                )

            movements_deleted = self.repository.delete_stock_movements(product_id)
            self.repository.delete(product)

        logger.info(
            f"Product deleted: {product_name} (id={product_id}, "
            f"stock movements removed: {movements_deleted})"
        )
        return ProductDeleteResponse(
            success=True,
            message="Product deleted successfully",
            product=product_name
        )
