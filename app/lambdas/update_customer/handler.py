# app/lambdas/update_customer/handler.py
import json
import logging

from customer_records import CustomerRecordsError, CustomerStore, Settings
from customer_records import records, responses

settings = Settings.from_env()

logger = logging.getLogger()
logger.setLevel(settings.log_level)

store = CustomerStore.from_settings(settings)


def update_customer(event, store):
    """
    Replace all five mutable fields on the record.

    Required fields are not validated here, and the record is not looked
    up first: an unknown id is written as a new record.
    """
    customer_id = records.customer_id_from_path(event)
    payload = records.parse_body(event)
    return store.update(customer_id, records.mutable_fields(payload))


def lambda_handler(event, context):
    """PUT /customers/{customerId}"""
    logger.info("Received event: %s", json.dumps(event))

    try:
        customer = update_customer(event, store)
    except CustomerRecordsError as exc:
        return responses.error_response(exc)

    return responses.json_response(200, customer)
