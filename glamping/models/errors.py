"""Exceptions raised at the boundaries of the projection model."""


class GlampingModelError(Exception):
    """Base class for model errors."""


class StorageError(GlampingModelError):
    """A scenario could not be written to or read from storage."""


class InvalidScenarioError(GlampingModelError):
    """Imported or persisted scenario data is incomplete or malformed."""
