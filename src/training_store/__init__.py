"""SQLAlchemy-backed training store."""

from training_store.database import Base, init_db, make_engine, make_session_factory
from training_store.exceptions import (
    ActivityMappingError,
    StoreUnavailableError,
    TrainingStoreError,
)
from training_store.repository import SqlTrainingStore

__all__ = [
    "ActivityMappingError",
    "Base",
    "SqlTrainingStore",
    "StoreUnavailableError",
    "TrainingStoreError",
    "init_db",
    "make_engine",
    "make_session_factory",
]
