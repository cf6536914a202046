# app/customer_records/ids.py
import time
import uuid
from typing import Callable


def timestamp_id() -> str:
    """Epoch milliseconds as a string. Two creates in the same millisecond collide."""
    return str(int(time.time() * 1000))


def uuid_id() -> str:
    return str(uuid.uuid4())


_STRATEGIES = {
    "timestamp": timestamp_id,
    "uuid": uuid_id,
}


def id_generator(strategy: str = "timestamp") -> Callable[[], str]:
    try:
        return _STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"Unknown customer id strategy: {strategy}") from None
