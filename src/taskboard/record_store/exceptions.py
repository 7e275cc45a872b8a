"""Custom exceptions for the record store."""


class RecordStoreError(Exception):
    """Base exception for record store errors."""


class RecordNotFoundError(RecordStoreError):
    """Record with given ID does not exist."""
