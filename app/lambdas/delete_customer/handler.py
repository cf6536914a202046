# app/lambdas/delete_customer/handler.py
import json
import logging

from customer_records import CustomerRecordsError, CustomerStore, Settings
from customer_records import records, responses

settings = Settings.from_env()

logger = logging.getLogger()
logger.setLevel(settings.log_level)

store = CustomerStore.from_settings(settings)


def delete_customer(event, store):
    # DeleteItem on a missing key is not an error.
    customer_id = records.customer_id_from_path(event)
    store.delete(customer_id)
    return customer_id


def lambda_handler(event, context):
    """DELETE /customers/{customerId}"""
    logger.info("Received event: %s", json.dumps(event))

    try:
        customer_id = delete_customer(event, store)
    except CustomerRecordsError as exc:
        return responses.error_response(exc)

    logger.info("Deleted customer %s", customer_id)
    return responses.empty_response(204)
