"""
Client configuration.

Reads settings from environment variables, optionally through a local .env file:
- ES_HOST: Elasticsearch URL
- ES_TIMEOUT: Default request timeout in seconds
- ES_SQL_TRANSPORT: "httpx" or "elasticsearch"
- LOG_LEVEL: Logging level
"""

import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class ClientConfig(BaseModel):
    """Configuration for SqlClient."""

    es_host: str = "http://localhost:9200"
    timeout: float = Field(default=30.0, gt=0)
    transport: Literal["httpx", "elasticsearch"] = "httpx"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv_path: str = ".env") -> "ClientConfig":
        """
        Build configuration from the environment.

        Args:
            dotenv_path: .env file to load first; existing variables win

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        load_dotenv(dotenv_path)

        values = {
            "es_host": os.getenv("ES_HOST"),
            "timeout": os.getenv("ES_TIMEOUT"),
            "transport": os.getenv("ES_SQL_TRANSPORT"),
            "log_level": os.getenv("LOG_LEVEL"),
        }
        return cls(**{key: value for key, value in values.items() if value})
