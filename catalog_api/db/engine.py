# catalog_api/db/engine.py

import os
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

DB_URL = os.getenv("CATALOG_API_DB_URL", "sqlite:///db.sqlite")  # file in project root

@lru_cache(maxsize=None)
def _engine_for(url: str) -> Engine:
    # echo=True if you want to see SQL printed in the terminal
    return create_engine(url, future=True)

def get_engine() -> Engine:
    # one engine (and pool) per URL for the life of the process
    return _engine_for(DB_URL)
