# app/customer_records/responses.py
import json
import logging
from decimal import Decimal
from typing import Any, Dict

from .errors import CustomerRecordsError

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Credentials": "true",
}


def _json_default(value):
    # DynamoDB hands numbers back as Decimal.
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def json_response(status_code: int, body: Any) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {**CORS_HEADERS, "Content-Type": "application/json"},
        "body": json.dumps(body, default=_json_default),
    }


def empty_response(status_code: int = 204) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": dict(CORS_HEADERS),
        "body": "",
    }


def error_response(error: CustomerRecordsError) -> Dict[str, Any]:
    """Shape an error as ``{"error": message}`` with its status code."""
    if error.status_code >= 500:
        logger.error("Request failed: %s", error.message, exc_info=error)
    else:
        logger.warning("Rejected request (%d): %s", error.status_code, error.message)
    return json_response(error.status_code, {"error": error.message})
