# app/customer_records/store.py
"""DynamoDB access for customer records.

`CustomerStore` wraps a boto3 ``Table`` resource keyed by ``customerId``.
Every SDK or serialization failure is re-raised as :class:`StoreError` with its
message so handlers can surface it unchanged.
"""
import functools
import logging
from decimal import DecimalException
from typing import Any, Dict, Iterator, List, Optional, Tuple

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .config import Settings
from .errors import StoreError
from .records import MUTABLE_FIELDS

logger = logging.getLogger(__name__)

KEY_NAME = "customerId"


def _error_message(exc: Exception) -> str:
    if isinstance(exc, ClientError):
        return exc.response.get("Error", {}).get("Message") or str(exc)
    return str(exc)


def _store_call(func):
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        try:
            return func(self, *args, **kwargs)
        except (ClientError, BotoCoreError) as exc:
            logger.error("DynamoDB %s failed on %s: %s", func.__name__, self.table_name, exc)
            raise StoreError(_error_message(exc)) from exc
        except (TypeError, DecimalException) as exc:
            # Raised by the boto3 serializer for values DynamoDB cannot store.
            logger.error("DynamoDB %s rejected a value on %s: %s", func.__name__, self.table_name, exc)
            raise StoreError(str(exc) or type(exc).__name__) from exc
    return wrapper


class CustomerStore:
    def __init__(self, table):
        self.table = table

    @classmethod
    def from_settings(cls, settings: Settings) -> "CustomerStore":
        """Build the store once per process from the Lambda settings."""
        kwargs = {}
        if settings.region:
            kwargs["region_name"] = settings.region
        if settings.endpoint_url:
            kwargs["endpoint_url"] = settings.endpoint_url
        dynamodb = boto3.resource("dynamodb", **kwargs)
        return cls(dynamodb.Table(settings.table_name))

    @property
    def table_name(self) -> str:
        return getattr(self.table, "name", "unknown")

    @_store_call
    def get(self, customer_id: str) -> Optional[Dict[str, Any]]:
        logger.debug("GetItem %s", customer_id)
        return self.table.get_item(Key={KEY_NAME: customer_id}).get("Item")

    @_store_call
    def put(self, customer: Dict[str, Any]) -> None:
        logger.debug("PutItem %s", customer[KEY_NAME])
        self.table.put_item(Item=customer)

    @_store_call
    def update(self, customer_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Overwrite every mutable field and return the record as stored.

        DynamoDB creates the item when the key does not exist yet.
        """
        logger.debug("UpdateItem %s", customer_id)
        assignments = ", ".join(f"#{name} = :{name}" for name in MUTABLE_FIELDS)
        result = self.table.update_item(
            Key={KEY_NAME: customer_id},
            UpdateExpression=f"SET {assignments}",
            ExpressionAttributeNames={f"#{name}": name for name in MUTABLE_FIELDS},
            ExpressionAttributeValues={f":{name}": fields.get(name) for name in MUTABLE_FIELDS},
            ReturnValues="ALL_NEW",
        )
        return result.get("Attributes", {})

    @_store_call
    def delete(self, customer_id: str) -> None:
        logger.debug("DeleteItem %s", customer_id)
        self.table.delete_item(Key={KEY_NAME: customer_id})

    @_store_call
    def scan_page(
        self, limit: Optional[int] = None, start_key: Optional[Dict[str, Any]] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """One Scan page and the key to continue from (None when done)."""
        params: Dict[str, Any] = {}
        if limit:
            params["Limit"] = limit
        if start_key:
            params["ExclusiveStartKey"] = start_key
        resp = self.table.scan(**params)
        return resp.get("Items", []), resp.get("LastEvaluatedKey")

    def iter_all(self) -> Iterator[Dict[str, Any]]:
        start_key = None
        while True:
            items, start_key = self.scan_page(start_key=start_key)
            yield from items
            if not start_key:
                break

    def scan_all(self) -> List[Dict[str, Any]]:
        items = list(self.iter_all())
        logger.debug("Scan returned %d items from %s", len(items), self.table_name)
        return items
