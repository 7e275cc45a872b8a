"""Custom exceptions for the board loader."""


class LoaderError(Exception):
    """Base exception for loader errors."""


class LegacyBundleError(LoaderError):
    """Legacy bundle could not be parsed into a board."""
