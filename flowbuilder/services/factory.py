# flowbuilder/services/factory.py
import logging

from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from flowbuilder.config import Settings
from .storage import IStorage, MemStorage
from .sql_storage import SqlStorage
from .templates import sample_workflow

logger = logging.getLogger(__name__)


def build_storage(settings: Settings) -> IStorage:
    """Build the configured backend and seed the sample workflow if enabled."""
    if settings.storage_backend == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}, "echo": False}
        if settings.database_url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection, otherwise every session sees an empty database
            kwargs["poolclass"] = StaticPool
        storage = SqlStorage(create_engine(settings.database_url, **kwargs))
        storage.create_schema()
    else:
        storage = MemStorage()
    logger.info("Using %s storage", settings.storage_backend)

    if settings.seed_sample_workflow:
        storage.create_workflow(sample_workflow())
    return storage
