"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a zone or the player cannot be built from the content tables."""
