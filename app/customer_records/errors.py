# app/customer_records/errors.py
"""Errors raised by the customer record handlers.

Each error carries the HTTP status the handler responds with.
"""


class CustomerRecordsError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(CustomerRecordsError):
    status_code = 400


class NotFoundError(CustomerRecordsError):
    status_code = 404


class StoreError(CustomerRecordsError):
    """Any failure reported by DynamoDB or the AWS SDK."""

    status_code = 500
