# app/lambdas/get_customer/handler.py
import json
import logging

from customer_records import CustomerRecordsError, CustomerStore, NotFoundError, Settings
from customer_records import records, responses

settings = Settings.from_env()

logger = logging.getLogger()
logger.setLevel(settings.log_level)

store = CustomerStore.from_settings(settings)


def get_customer(event, store):
    customer_id = records.customer_id_from_path(event)
    customer = store.get(customer_id)
    if customer is None:
        raise NotFoundError("Customer not found")
    return customer


def lambda_handler(event, context):
    """GET /customers/{customerId}"""
    logger.info("Received event: %s", json.dumps(event))

    try:
        customer = get_customer(event, store)
    except CustomerRecordsError as exc:
        return responses.error_response(exc)

    return responses.json_response(200, customer)
