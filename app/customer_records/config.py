# app/customer_records/config.py
import logging
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_TABLE_NAME = "CustomerRecords"
ID_STRATEGIES = ("timestamp", "uuid")


@dataclass(frozen=True)
class Settings:
    table_name: str = DEFAULT_TABLE_NAME
    region: Optional[str] = None
    endpoint_url: Optional[str] = None
    id_strategy: str = "timestamp"
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """Read settings from the Lambda environment."""
        env = os.environ if environ is None else environ

        id_strategy = env.get("CUSTOMER_ID_STRATEGY", "timestamp").strip().lower()
        if id_strategy not in ID_STRATEGIES:
            raise ValueError(
                f"CUSTOMER_ID_STRATEGY must be one of {', '.join(ID_STRATEGIES)}, got {id_strategy!r}"
            )

        level_name = env.get("LOG_LEVEL", "INFO").strip().upper()
        log_level = logging.getLevelName(level_name)
        if not isinstance(log_level, int):
            raise ValueError(f"Unknown LOG_LEVEL {level_name!r}")

        return cls(
            table_name=env.get("TABLE_NAME") or DEFAULT_TABLE_NAME,
            region=env.get("AWS_REGION") or None,
            endpoint_url=env.get("DYNAMODB_ENDPOINT_URL") or None,
            id_strategy=id_strategy,
            log_level=log_level,
        )
