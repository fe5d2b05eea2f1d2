# app/services/shop_service.py
import logging

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.models.enums import EntityKind, ValidationMode
from app.models.shop import Shop
from app.repositories.shop_repository import ShopRepository
from app.utils.validation_functions import validate

logger = logging.getLogger(__name__)


class ShopService:
    """Create/read/update/delete use cases for shops."""

    def __init__(self, db: Session):
        self.shops = ShopRepository(db)

    def create(self, payload) -> Shop:
        fields = validate(EntityKind.shop, payload, ValidationMode.create)
        shop = self.shops.create(fields)
        logger.info("Shop created", extra={"shop_id": str(shop.id)})
        return shop

    def get(self, shop_id) -> Shop:
        shop = self.shops.get_by_id(shop_id, include_products=True)
        if not shop:
            raise NotFoundError("Shop", shop_id)
        return shop

    def list(self):
        return self.shops.list()

    def update(self, shop_id, payload) -> Shop:
        if not self.shops.get_by_id(shop_id):
            raise NotFoundError("Shop", shop_id)
        fields = validate(EntityKind.shop, payload, ValidationMode.update)
        shop = self.shops.update(shop_id, fields)
        logger.info("Shop updated", extra={"shop_id": str(shop.id), "fields": sorted(fields)})
        return shop

    def delete(self, shop_id) -> None:
        self.shops.delete(shop_id)
        logger.info("Shop deleted", extra={"shop_id": str(shop_id)})
