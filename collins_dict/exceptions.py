#!/usr/bin/env python3
"""
Error taxonomy for dictionary lookups.

Extraction and fetching code raises these; only the command-line entry point
decides what gets printed and which exit code is returned.
"""


class DictionaryError(Exception):
    """Base class for every failure raised by a lookup."""

    message = "error: Failed to look up word"


class UsageError(DictionaryError):
    """Raised when the command line is malformed."""

    message = "error: Incorrect number of arguments"


class NetworkError(DictionaryError):
    """Raised when the search page could not be fetched (non-200 or no connection)."""

    message = "error: Failed to get web content"

    def __init__(self, detail: str = "", status_code: int = 0):
        super().__init__(detail or self.message)
        self.status_code = status_code


class ParseError(DictionaryError):
    """Raised when the fetched body cannot be parsed into a document."""

    message = "error: Failed to parse webpage"


class StructuralExtractionError(DictionaryError):
    """Raised when an element the site always renders is missing."""

    message = "error: Failed to get data"

    def __init__(self, detail: str, selector: str = ""):
        super().__init__(detail)
        self.selector = selector
