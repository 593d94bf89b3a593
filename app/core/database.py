# app/core/database.py
import asyncio
from functools import lru_cache

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import get_settings

Base = declarative_base()


class Store:
    def __init__(self, url: str):
        if url.startswith("sqlite"):
            connect_args = {"check_same_thread": False}
            # In-memory: every session shares the one connection holding the data
            if url in ("sqlite://", "sqlite:///:memory:"):
                self.engine = create_engine(url, connect_args=connect_args, poolclass=StaticPool)
            else:
                self.engine = create_engine(url, connect_args=connect_args)
        else:
            self.engine = create_engine(url)

        self.SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=self.engine
        )
        self.lock = asyncio.Lock()
        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


@lru_cache
def get_store() -> Store:
    return Store(get_settings().DATABASE_URL)


# Common DB dependency: one request at a time touches the store.
# Waiting happens on the event loop, not in a worker thread.
async def get_db(store: Store = Depends(get_store)):
    async with store.lock:
        db = store.SessionLocal()
        try:
            yield db
        finally:
            db.close()
