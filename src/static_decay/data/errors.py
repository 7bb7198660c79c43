"""Exceptions raised while loading the static content tables."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when a content table is missing or is not valid JSON."""


class DataValidationError(DataError):
    """Raised when a table entry has the wrong shape, type or coordinates."""


class DataReferenceError(DataError):
    """Raised when a recipe or zone names an item that does not exist."""
