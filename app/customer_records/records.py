# app/customer_records/records.py
"""Customer record shape and request parsing shared by the handlers."""
import base64
import binascii
import json
from decimal import Decimal
from typing import Any, Dict, Optional

from .errors import ValidationError

REQUIRED_FIELDS = ("firstName", "lastName", "email")
OPTIONAL_FIELDS = ("phone", "address")
MUTABLE_FIELDS = REQUIRED_FIELDS + OPTIONAL_FIELDS


def _reject_constant(name):
    raise ValueError(f"Unsupported JSON constant: {name}")


def parse_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """Decode the JSON object in an API Gateway proxy event body.

    A missing body is treated as an empty object.
    """
    raw = event.get("body")
    if raw is None or raw == "":
        return {}

    if event.get("isBase64Encoded"):
        try:
            raw = base64.b64decode(raw).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            raise ValidationError("Request body is not valid base64") from None

    try:
        # DynamoDB rejects float, numbers go through Decimal.
        payload = json.loads(raw, parse_float=Decimal, parse_constant=_reject_constant)
    except (TypeError, ValueError):
        raise ValidationError("Request body must be valid JSON") from None

    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def customer_id_from_path(event: Dict[str, Any]) -> str:
    params = event.get("pathParameters") or {}
    customer_id = params.get("customerId")
    if not customer_id:
        raise ValidationError("customerId path parameter is required")
    return customer_id


def _or_none(value: Any) -> Optional[Any]:
    # Empty or falsy values are stored as null, same as absent values.
    return value if value else None


def require_fields(payload: Dict[str, Any]) -> None:
    missing = [name for name in REQUIRED_FIELDS if not payload.get(name)]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def mutable_fields(payload: Dict[str, Any]) -> Dict[str, Any]:
    """All five mutable fields from a payload, absent values as None."""
    fields = {name: payload.get(name) for name in REQUIRED_FIELDS}
    fields.update((name, _or_none(payload.get(name))) for name in OPTIONAL_FIELDS)
    return fields


def new_customer(customer_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    customer = {"customerId": customer_id}
    customer.update(mutable_fields(payload))
    return customer
