from __future__ import annotations

import logging

from verifydip.core.config import Settings
from verifydip.db.base import Base
from verifydip.db.session import make_engine, make_session_factory
from verifydip.storage.base import Storage
from verifydip.storage.memory import MemStorage
from verifydip.storage.sql import SqlStorage

logger = logging.getLogger(__name__)


def build_storage(settings: Settings) -> Storage:
    if settings.storage_backend == "sql":
        engine = make_engine(settings.database_url)
        Base.metadata.create_all(bind=engine)
        logger.info("using sql storage", extra={"dialect": engine.dialect.name})
        return SqlStorage(make_session_factory(engine))

    logger.info("using in-memory storage")
    return MemStorage()
