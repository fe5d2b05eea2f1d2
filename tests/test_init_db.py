"""Tests for the demo catalog seeding."""

from app.db.init_db import seed_demo_data
from app.models.product import Product
from app.models.shop import Shop


def test_seed_inserts_demo_catalog(db_session):
    assert seed_demo_data(db_session) == 2

    shops = {shop.name: shop for shop in db_session.query(Shop).all()}
    assert set(shops) == {"TechStore", "BookHaven"}
    assert sorted(p.name for p in shops["TechStore"].products) == ["Laptop", "Smartphone"]
    assert [p.category for p in shops["BookHaven"].products] == ["Books"]


def test_seed_skips_populated_database(db_session):
    seed_demo_data(db_session)

    assert seed_demo_data(db_session) == 0
    assert db_session.query(Shop).count() == 2
    assert db_session.query(Product).count() == 3
