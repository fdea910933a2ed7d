"""Exceptions raised by the service and core layers.

Every error subclasses ``ValueError`` so callers that only care about
"bad input" can catch the base type. Routes map each class to its own
HTTP status.
"""


class StringAnalyzerError(ValueError):
    """Base class for service errors."""


class StringAlreadyExists(StringAnalyzerError):
    pass


class StringNotFound(StringAnalyzerError):
    pass


class InvalidFilter(StringAnalyzerError):
    """An explicit filter value was malformed or out of range."""


class TranslationFailed(StringAnalyzerError):
    """No rule in the natural-language pattern library matched the query."""

    def __init__(self, query: str):
        self.query = query
        super().__init__("Unable to parse natural language query")


class ConflictingFilters(StringAnalyzerError):
    """The assembled filter set cannot be satisfied by any record."""

    def __init__(self, filters: dict):
        self.filters = filters
        super().__init__("Query parsed but resulted in conflicting filters")
