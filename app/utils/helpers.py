# app/utils/helpers.py
import uuid
from datetime import datetime, timezone

from app.core.exceptions import ValidationError


def utcnow():
    return datetime.now(timezone.utc)


def parse_uuid(value):
    """
    Coerce a path/body identifier into a UUID.
    Returns None for anything that is not a well-formed UUID, so callers
    can treat a malformed id exactly like an unknown one.
    """
    if isinstance(value, uuid.UUID):
        return value
    if not isinstance(value, str):
        return None
    try:
        return uuid.UUID(value.strip())
    except ValueError:
        return None


def serialize_product(product):
    return {
        "product_id": str(product.id),
        "shop_id": str(product.shop_id),
        "name": product.name,
        "description": product.description,
        "price": float(product.price),
        "category": product.category,
        "created_at": product.created_at.isoformat(),
        "updated_at": product.updated_at.isoformat()
    }


def serialize_shop(shop, include_products=False):
    data = {
        "shop_id": str(shop.id),
        "name": shop.name,
        "location": shop.location,
        "created_at": shop.created_at.isoformat(),
        "updated_at": shop.updated_at.isoformat()
    }
    if include_products:
        data["products"] = [serialize_product(p) for p in shop.products]
    return data


def validation_error_response(errors):
    return {"errors": errors}


def message_response(message):
    return {"message": message}


async def read_json_body(request):
    """
    Parse the request body as JSON. Malformed JSON is reported the same way
    as any other payload problem, as a 400 with a "body" error.
    """
    try:
        return await request.json()
    except ValueError:
        raise ValidationError([{"param": "body", "msg": "Request body must be valid JSON"}])
