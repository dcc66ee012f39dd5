"""Errors raised across the recipe catalog."""


class DatasetLoadError(RuntimeError):
    """The recipe dataset could not be read or parsed."""


class ValidationError(ValueError):
    """A required field is missing or empty."""
