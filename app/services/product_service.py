# app/services/product_service.py
import logging

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.models.enums import EntityKind, ValidationMode
from app.models.product import Product
from app.repositories.product_repository import ProductRepository
from app.utils.validation_functions import validate

logger = logging.getLogger(__name__)


class ProductService:
    """Create/read/update/delete use cases for products."""

    def __init__(self, db: Session):
        self.products = ProductRepository(db)

    def create(self, payload) -> Product:
        fields = validate(EntityKind.product, payload, ValidationMode.create)
        product = self.products.create(fields)
        logger.info("Product created", extra={"product_id": str(product.id), "shop_id": str(product.shop_id)})
        return product

    def get(self, product_id) -> Product:
        product = self.products.get_by_id(product_id)
        if not product:
            raise NotFoundError("Product", product_id)
        return product

    def list(self):
        return self.products.list()

    def update(self, product_id, payload) -> Product:
        if not self.products.get_by_id(product_id):
            raise NotFoundError("Product", product_id)
        fields = validate(EntityKind.product, payload, ValidationMode.update)
        product = self.products.update(product_id, fields)
        logger.info("Product updated", extra={"product_id": str(product.id), "fields": sorted(fields)})
        return product

    def delete(self, product_id) -> None:
        self.products.delete(product_id)
        logger.info("Product deleted", extra={"product_id": str(product_id)})
