"""Errors raised by the search engine."""


class InvariantError(RuntimeError):
    """An internal consistency check of the search failed."""
