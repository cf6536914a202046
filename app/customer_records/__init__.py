# app/customer_records/__init__.py
"""Shared code for the customer record Lambda functions."""
from .config import Settings
from .errors import CustomerRecordsError, NotFoundError, StoreError, ValidationError
from .store import CustomerStore

__all__ = [
    "CustomerRecordsError",
    "CustomerStore",
    "NotFoundError",
    "Settings",
    "StoreError",
    "ValidationError",
]
