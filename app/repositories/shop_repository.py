# app/repositories/shop_repository.py
import logging

from sqlalchemy.orm import selectinload

from app.core.exceptions import NotFoundError
from app.models.shop import Shop
from app.models.product import Product  # noqa: F401 - target of Shop.products
from app.repositories.base import BaseRepository
from app.utils.helpers import parse_uuid, utcnow

logger = logging.getLogger(__name__)


class ShopRepository(BaseRepository):

    def create(self, fields: dict) -> Shop:
        now = utcnow()
        shop = Shop(
            name=fields["name"],
            location=fields["location"],
            created_at=now,
            updated_at=now
        )
        with self.transaction():
            self.db.add(shop)
        self.db.refresh(shop)
        return shop

    def get_by_id(self, shop_id, include_products=False):
        """Return the shop, or None if the id is unknown or malformed."""
        key = parse_uuid(shop_id)
        if key is None:
            return None

        with self.reading():
            query = self.db.query(Shop).filter(Shop.id == key)
            if include_products:
                query = query.options(selectinload(Shop.products))
            return query.first()

    def list(self):
        with self.reading():
            return self.db.query(Shop).order_by(Shop.created_at, Shop.id).all()

    def update(self, shop_id, fields: dict) -> Shop:
        key = parse_uuid(shop_id)
        with self.transaction():
            shop = self._locked(key)
            for field in ("name", "location"):
                if field in fields:
                    setattr(shop, field, fields[field])
            shop.updated_at = utcnow()
        self.db.refresh(shop)
        return shop

    def delete(self, shop_id) -> None:
        """
        Delete the shop together with every product that belongs to it.
        Both go in the same transaction: readers see either all or none of it.
        """
        key = parse_uuid(shop_id)
        with self.transaction():
            shop = self._locked(key)
            removed = len(shop.products)
            self.db.delete(shop)
        logger.debug("Shop %s deleted with %d product(s)", key, removed)

    def _locked(self, key) -> Shop:
        shop = None
        if key is not None:
            shop = self.db.query(Shop).filter(Shop.id == key).with_for_update().first()
        if not shop:
            raise NotFoundError("Shop", key)
        return shop
