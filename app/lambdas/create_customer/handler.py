# app/lambdas/create_customer/handler.py
import json
import logging

from customer_records import CustomerRecordsError, CustomerStore, Settings
from customer_records import records, responses
from customer_records.ids import id_generator

settings = Settings.from_env()

logger = logging.getLogger()
logger.setLevel(settings.log_level)

store = CustomerStore.from_settings(settings)
new_customer_id = id_generator(settings.id_strategy)


def create_customer(event, store, new_id):
    """Validate the payload, assign an id and write the record."""
    payload = records.parse_body(event)
    records.require_fields(payload)

    # No existence check, a fresh id is assumed never to collide.
    customer = records.new_customer(new_id(), payload)
    store.put(customer)
    return customer


def lambda_handler(event, context):
    """POST /customers"""
    logger.info("Received event: %s", json.dumps(event))

    try:
        customer = create_customer(event, store, new_customer_id)
    except CustomerRecordsError as exc:
        return responses.error_response(exc)

    logger.info("Created customer %s", customer["customerId"])
    return responses.json_response(201, customer)
