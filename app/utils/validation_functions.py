# app/utils/validation_functions.py
import math
import uuid
from decimal import Decimal, InvalidOperation

from app.core.exceptions import ValidationError
from app.models.enums import EntityKind, ValidationMode

REQUIRED_TEXT = "required_text"
OPTIONAL_TEXT = "optional_text"
PRICE = "price"
FOREIGN_KEY = "foreign_key"

MAX_PRICE = Decimal("1e13")
CENTS = Decimal("0.01")

# field -> (rule, required on create)
FIELD_RULES = {
    EntityKind.shop: {
        "name": (REQUIRED_TEXT, True),
        "location": (REQUIRED_TEXT, True),
    },
    EntityKind.product: {
        "shop_id": (FOREIGN_KEY, True),
        "name": (REQUIRED_TEXT, True),
        "description": (OPTIONAL_TEXT, False),
        "price": (PRICE, True),
        "category": (REQUIRED_TEXT, True),
    },
}


def validate_required_text(value):
    """
    Non-empty text. Returns the stripped string.
    Raises ValueError if missing, not a string, or whitespace-only.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError("must be a non-empty string")
    return value.strip()


def validate_optional_text(value):
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError("must be a string or null")
    return value


def validate_price(value):
    """
    Finite, non-negative number. Booleans are not numbers here even though
    Python treats them as ints. Returns a Decimal.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise ValueError("must be a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError("must be a finite number")
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValueError("must be a number")
    if not amount.is_finite():
        raise ValueError("must be a finite number")
    if amount < 0:
        raise ValueError("must be greater than or equal to 0")
    # Numeric(15, 2): 13 integer digits, 2 decimal places
    if amount >= MAX_PRICE:
        raise ValueError(f"must be less than {MAX_PRICE:f}")
    if amount != amount.quantize(CENTS):
        raise ValueError("must have at most 2 decimal places")
    return amount


def validate_foreign_key(value):
    if not isinstance(value, str):
        raise ValueError("must be a valid identifier")
    try:
        return uuid.UUID(value.strip())
    except ValueError:
        raise ValueError("must be a valid identifier")


RULE_CHECKS = {
    REQUIRED_TEXT: validate_required_text,
    OPTIONAL_TEXT: validate_optional_text,
    PRICE: validate_price,
    FOREIGN_KEY: validate_foreign_key,
}


def validate(entity_kind: EntityKind, payload, mode: ValidationMode) -> dict:
    """
    Check a request payload against the field rules of an entity kind.

    Create mode requires every required field; update mode only checks the
    keys that were supplied, so omitted keys stay untouched on the record.
    An explicit null is a supplied value and is validated like any other.

    Returns the sanitized fields (unknown keys dropped).
    Raises ValidationError listing every violated rule, not just the first.
    """
    if not isinstance(payload, dict):
        raise ValidationError([{"param": "body", "msg": "Request body must be a JSON object"}])

    errors = []
    fields = {}
    for field, (rule, required) in FIELD_RULES[entity_kind].items():
        if field not in payload:
            if mode is ValidationMode.create and required:
                errors.append({"param": field, "msg": f"{field} is required"})
            continue
        try:
            fields[field] = RULE_CHECKS[rule](payload[field])
        except ValueError as e:
            errors.append({"param": field, "msg": f"{field} {e}"})

    if errors:
        raise ValidationError(errors)
    return fields
