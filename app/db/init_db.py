# app/db/init_db.py
import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from app.core import config
from app.db.base import Base
from app.db.get_db import engine, SessionLocal
from app.models.shop import Shop
from app.models.product import Product
from app.utils.helpers import utcnow

logger = logging.getLogger(__name__)

DEMO_CATALOG = [
    {
        "name": "TechStore",
        "location": "123 Main Street",
        "products": [
            {"name": "Laptop", "description": "High-performance laptop", "price": Decimal("1200"), "category": "Electronics"},
            {"name": "Smartphone", "description": "Latest smartphone model", "price": Decimal("800"), "category": "Electronics"},
        ],
    },
    {
        "name": "BookHaven",
        "location": "456 Oak Avenue",
        "products": [
            {"name": "The Lord of the Rings", "description": "Fantasy novel by J.R.R. Tolkien", "price": Decimal("25"), "category": "Books"},
        ],
    },
]


def seed_demo_data(db: Session) -> int:
    """
    Insert the demo shops and products, unless any shop already exists.
    Returns the number of shops inserted.
    """
    if db.query(Shop.id).first() is not None:
        return 0

    now = utcnow()
    for entry in DEMO_CATALOG:
        shop = Shop(name=entry["name"], location=entry["location"], created_at=now, updated_at=now)
        shop.products = [
            Product(created_at=now, updated_at=now, **product)
            for product in entry["products"]
        ]
        db.add(shop)
    db.commit()
    return len(DEMO_CATALOG)


def init_db():
    Base.metadata.create_all(bind=engine)
    if config.SEED_DEMO_DATA:
        db = SessionLocal()
        try:
            inserted = seed_demo_data(db)
        finally:
            db.close()
        if inserted:
            logger.info("Seeded %d demo shop(s)", inserted)
