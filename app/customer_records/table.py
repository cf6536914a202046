# app/customer_records/table.py
import logging

from .store import KEY_NAME

logger = logging.getLogger(__name__)


def create_customer_table(client, table_name: str) -> str:
    """Create the customer table (hash key only, on-demand) and wait for it."""
    client.create_table(
        TableName=table_name,
        KeySchema=[{"AttributeName": KEY_NAME, "KeyType": "HASH"}],
        AttributeDefinitions=[{"AttributeName": KEY_NAME, "AttributeType": "S"}],
        BillingMode="PAY_PER_REQUEST",
    )
    client.get_waiter("table_exists").wait(TableName=table_name)
    logger.info("Created table %s", table_name)
    return table_name
