"""Exceptions raised while building filters."""


class CatalogFiltersError(Exception):
    """Base class for filter building errors."""


class LookupMissError(CatalogFiltersError, LookupError):
    """A referenced feature or attribute group has no name or value range.

    This points at inconsistent catalog data, not at an empty result.
    """


class InvalidArgumentError(CatalogFiltersError, ValueError):
    """A caller passed arguments outside the operation's contract."""
