# tests/integration/conftest.py
"""
Fixtures for running the customer store against a local DynamoDB endpoint.

Start DynamoDB Local (or any compatible emulator) and point the tests at it:

    docker run -p 8000:8000 amazon/dynamodb-local
    DYNAMODB_ENDPOINT_URL=http://localhost:8000 pytest tests/integration -v

Tests are skipped when the endpoint does not answer.
"""
import os
import time
import uuid
from typing import Generator

import boto3
import pytest
import requests

from customer_records import CustomerStore
from customer_records.table import create_customer_table

ENDPOINT_URL = os.environ.get("DYNAMODB_ENDPOINT_URL", "http://localhost:8000")

# Dummy credentials, local endpoints don't validate them
AWS_ACCESS_KEY_ID = "testing"
AWS_SECRET_ACCESS_KEY = "testing"
AWS_REGION = "us-east-1"


def wait_for_endpoint(endpoint: str, timeout: float = 5.0) -> bool:
    """Any HTTP answer means the emulator is up."""
    start = time.time()
    while time.time() - start < timeout:
        try:
            requests.get(endpoint, timeout=1)
            return True
        except requests.RequestException:
            time.sleep(0.2)
    return False


@pytest.fixture(scope="session")
def dynamodb_endpoint() -> Generator[str, None, None]:
    if not wait_for_endpoint(ENDPOINT_URL):
        pytest.skip(f"No DynamoDB endpoint at {ENDPOINT_URL}")
    yield ENDPOINT_URL


@pytest.fixture(scope="session")
def dynamodb_client(dynamodb_endpoint: str):
    return boto3.client(
        "dynamodb",
        endpoint_url=dynamodb_endpoint,
        aws_access_key_id=AWS_ACCESS_KEY_ID,
        aws_secret_access_key=AWS_SECRET_ACCESS_KEY,
        region_name=AWS_REGION,
    )


@pytest.fixture(scope="session")
def dynamodb_resource(dynamodb_endpoint: str):
    return boto3.resource(
        "dynamodb",
        endpoint_url=dynamodb_endpoint,
        aws_access_key_id=AWS_ACCESS_KEY_ID,
        aws_secret_access_key=AWS_SECRET_ACCESS_KEY,
        region_name=AWS_REGION,
    )


@pytest.fixture
def customer_table(dynamodb_client) -> Generator[str, None, None]:
    """Function-scoped customer table, dropped after the test."""
    table_name = f"test-customers-{uuid.uuid4().hex[:8]}"
    create_customer_table(dynamodb_client, table_name)
    yield table_name
    dynamodb_client.delete_table(TableName=table_name)


@pytest.fixture
def live_store(dynamodb_resource, customer_table) -> CustomerStore:
    return CustomerStore(dynamodb_resource.Table(customer_table))
