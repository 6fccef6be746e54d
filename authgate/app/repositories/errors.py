"""
Storage errors raised by credential store adapters.

Adapters translate driver-specific exceptions into these so that nothing
above the repository layer depends on a concrete storage technology.
"""


class StorageError(Exception):
    """Unexpected failure talking to the credential store"""


class StorageConflictError(StorageError):
    """A uniqueness constraint rejected the write"""
