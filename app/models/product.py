# app/models/product.py
import uuid
from sqlalchemy import Column, Text, DateTime, Numeric, ForeignKey, CheckConstraint, Uuid
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.utils.helpers import utcnow


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (CheckConstraint("price >= 0", name="ck_products_price_non_negative"),)

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    shop_id = Column(Uuid(as_uuid=True), ForeignKey("shops.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(Text, nullable=False)
    description = Column(Text)
    price = Column(Numeric(15, 2), nullable=False)
    category = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    shop = relationship("Shop", back_populates="products")
