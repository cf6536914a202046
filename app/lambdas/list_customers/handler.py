# app/lambdas/list_customers/handler.py
import json
import logging

from customer_records import CustomerRecordsError, CustomerStore, Settings
from customer_records import responses

settings = Settings.from_env()

logger = logging.getLogger()
logger.setLevel(settings.log_level)

store = CustomerStore.from_settings(settings)


def list_customers(event, store):
    """Every record in the table, in scan order. Not paginated."""
    return store.scan_all()


def lambda_handler(event, context):
    """GET /customers"""
    logger.info("Received event: %s", json.dumps(event))

    try:
        customers = list_customers(event, store)
    except CustomerRecordsError as exc:
        return responses.error_response(exc)

    return responses.json_response(200, customers)
