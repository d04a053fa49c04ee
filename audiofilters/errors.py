"""Exceptions raised by the coefficient dispatch layer."""
from __future__ import annotations


class FilterDesignError(Exception):
    """Base class for filter design failures."""


class InvalidArgumentError(FilterDesignError, ValueError):
    """Raised when a request is missing a field or carries a bad value."""


class UnknownFilterError(FilterDesignError, LookupError):
    """Raised when a filter name does not resolve to any known design."""
