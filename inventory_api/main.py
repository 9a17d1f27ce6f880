# main.py
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from inventory_api.config import Settings, load_settings
from inventory_api.db import MongoItemStore
from inventory_api.routes import build_router

LOG = logging.getLogger("inventory")


def create_app(settings: Settings | None = None, store=None) -> FastAPI:
    """
    Build the Inventory Service app.
    When no store is given, a Mongo store is opened on startup and closed on shutdown.
    """
    settings = settings or load_settings()
    owns_store = store is None
    if owns_store:
        store = MongoItemStore(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if owns_store:
            store.connect()
        try:
            yield
        finally:
            if owns_store:
                store.close()
                LOG.info("MongoDB client closed")

    app = FastAPI(title="Inventory Service", lifespan=lifespan)
    app.state.store = store
    app.include_router(build_router(store))

    @app.get("/health")
    def health():
        return {"ok": True}

    return app


def main():
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    LOG.info("Starting Inventory Service on %s:%d", settings.host, settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
