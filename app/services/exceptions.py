# app/services/exceptions.py
"""
Error kinds raised by the document store and the repositories.
Every error is scoped to the single operation that raised it; the HTTP
layer maps each kind to a status code in app/main.py.
"""


class RepositoryError(Exception):
    """Base class for every storage-layer error."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RepositoryError):
    """Input failed a field rule."""


class DuplicateError(RepositoryError):
    """Identity key already present on insert."""


class NotFoundError(RepositoryError):
    """Identity key absent on lookup, update or delete."""


class NoChangeError(RepositoryError):
    """Edit payload is identical to the stored record."""


class StoreError(RepositoryError):
    """Underlying document store failure."""


class ReadError(StoreError):
    pass


class DecodeError(StoreError):
    pass


class WriteError(StoreError):
    pass
