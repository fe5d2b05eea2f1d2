# app/repositories/product_repository.py
from app.core.exceptions import ForeignKeyViolation, NotFoundError
from app.models.product import Product
from app.models.shop import Shop
from app.repositories.base import BaseRepository
from app.utils.helpers import parse_uuid, utcnow

PRODUCT_FIELDS = ("shop_id", "name", "description", "price", "category")


class ProductRepository(BaseRepository):

    def create(self, fields: dict) -> Product:
        shop_id = fields["shop_id"]
        now = utcnow()
        product = Product(
            shop_id=shop_id,
            name=fields["name"],
            description=fields.get("description"),
            price=fields["price"],
            category=fields["category"],
            created_at=now,
            updated_at=now
        )
        # A shop deleted between the check and the commit trips the FK constraint
        with self.transaction(on_integrity_error=ForeignKeyViolation("shop_id", "Shop", shop_id)):
            self._require_shop(shop_id)
            self.db.add(product)
        self.db.refresh(product)
        return product

    def get_by_id(self, product_id):
        """Return the product, or None if the id is unknown or malformed."""
        key = parse_uuid(product_id)
        if key is None:
            return None

        with self.reading():
            return self.db.query(Product).filter(Product.id == key).first()

    def list(self):
        with self.reading():
            return self.db.query(Product).order_by(Product.created_at, Product.id).all()

    def update(self, product_id, fields: dict) -> Product:
        key = parse_uuid(product_id)
        new_shop_id = fields.get("shop_id")
        with self.transaction(on_integrity_error=ForeignKeyViolation("shop_id", "Shop", new_shop_id)):
            product = None
            if key is not None:
                product = self.db.query(Product).filter(Product.id == key).with_for_update().first()
            if not product:
                raise NotFoundError("Product", key)

            if "shop_id" in fields:
                self._require_shop(new_shop_id)
            for field in PRODUCT_FIELDS:
                if field in fields:
                    setattr(product, field, fields[field])
            product.updated_at = utcnow()
        self.db.refresh(product)
        return product

    def delete(self, product_id) -> None:
        key = parse_uuid(product_id)
        with self.transaction():
            product = None
            if key is not None:
                product = self.db.query(Product).filter(Product.id == key).with_for_update().first()
            if not product:
                raise NotFoundError("Product", key)
            self.db.delete(product)

    def _require_shop(self, shop_id) -> None:
        exists = self.db.query(Shop.id).filter(Shop.id == shop_id).first()
        if exists is None:
            raise ForeignKeyViolation("shop_id", "Shop", shop_id)
