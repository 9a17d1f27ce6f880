# config.py
import os
from pydantic import BaseModel

# --- Configuration ---
MONGO_URL = "mongodb://localhost:27017"
DB_NAME = "inventory"
COLL_NAME = "items"


class Settings(BaseModel):
    mongo_url: str = MONGO_URL
    db_name: str = DB_NAME
    coll_name: str = COLL_NAME
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


def load_settings() -> Settings:
    """Read settings from the environment, falling back to the defaults."""
    return Settings(
        mongo_url=os.environ.get("MONGO_URL", MONGO_URL),
        db_name=os.environ.get("DB_NAME", DB_NAME),
        coll_name=os.environ.get("COLL_NAME", COLL_NAME),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "8000")),
    )
