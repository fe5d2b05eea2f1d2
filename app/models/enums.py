# app/models/enums.py
import enum


class EntityKind(enum.Enum):
    shop = "shop"
    product = "product"


class ValidationMode(enum.Enum):
    create = "create"
    update = "update"
