class StorageError(Exception):
    """Raised when a blob cannot be persisted."""


class StorageConfigurationError(StorageError):
    """Raised at first use when the storage target or credentials are missing."""
