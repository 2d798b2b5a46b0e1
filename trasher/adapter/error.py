"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class WordListError(AdapterError):
    """Word list could not be loaded."""

    pass
