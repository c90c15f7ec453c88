# /hostlist/config.py
from __future__ import annotations

import os

from pydantic import BaseModel


class Settings(BaseModel):
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # CLI positions match argv indexes (argv[0] is the program)
    POSITION_BASE: int = int(os.getenv("POSITION_BASE", "1"))

    # HTTP API
    API_KEY: str | None = os.getenv("API_KEY")
    MAX_HOSTS: int = int(os.getenv("MAX_HOSTS", "65536"))  # per request


settings = Settings()
