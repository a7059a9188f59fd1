"""Exception hierarchy for the training store."""


class TrainingStoreError(Exception):
    """Base exception for training store errors."""


class StoreUnavailableError(TrainingStoreError):
    """The database could not be reached or rejected a statement."""


class ActivityMappingError(TrainingStoreError, ValueError):
    """A raw activity dict is missing the fields a run record needs."""
