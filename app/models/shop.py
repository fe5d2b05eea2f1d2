# app/models/shop.py
import uuid
from sqlalchemy import Column, Text, DateTime, Uuid
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.utils.helpers import utcnow


class Shop(Base):
    __tablename__ = "shops"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    location = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    products = relationship(
        "Product",
        back_populates="shop",
        cascade="all, delete-orphan",
        order_by="Product.created_at",
    )
