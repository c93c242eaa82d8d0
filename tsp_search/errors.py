class SearchError(Exception):
    """Base class for errors raised by tsp_search."""


class InvalidConfiguration(SearchError, ValueError):
    """A search parameter is outside of its allowed range."""


class EmptyInput(SearchError, ValueError):
    """A city list or tour has no entries."""
