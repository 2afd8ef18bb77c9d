"""
Custom exceptions for the data center parser.

Error philosophy:
  - ExtractionError → FAIL HARD: the whole extraction call stops on the first
    malformed location block and no partial list is returned.  These are
    deterministic; running the same page again reproduces the same error, so
    callers should read them as "the page format changed".
  - FetchError → FAIL HARD at the network layer.  Not retried here.
"""

from typing import Optional


class DataCenterParserError(Exception):
    """Base exception for all data center parser errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# --- Extraction: raised by the Extractor, one class per failure kind ---

class ExtractionError(DataCenterParserError):
    """Base class for malformed location blocks."""
    pass


class IdMissing(ExtractionError):
    """A location block has no id attribute."""

    def __init__(self, details: Optional[dict] = None):
        super().__init__("Location block is missing its id attribute", details)


class CityMissing(ExtractionError):
    """A location block has no city label element."""

    def __init__(self, location_id: str, details: Optional[dict] = None):
        super().__init__(f"Location '{location_id}' is missing its city label", details)
        self.location_id = location_id


class RowShapeInvalid(ExtractionError):
    """
    A table row is not a label / spacer / value triple.

    Header rows are held to the same shape, so a page that adds one
    fails here rather than being skipped.
    """

    def __init__(self, location_id: str, cell_count: int, details: Optional[dict] = None):
        super().__init__(
            f"Location '{location_id}' has a row with {cell_count} data cells, expected 3",
            details
        )
        self.location_id = location_id
        self.cell_count = cell_count  # 4 means "at least four"; we stop looking after that


class UnknownService(ExtractionError):
    """An Available Services link title is outside the known vocabulary."""

    def __init__(self, title: str, details: Optional[dict] = None):
        super().__init__(f"Unknown available service: '{title}'", details)
        self.title = title


class InvalidPingAddress(ExtractionError):
    """The Ping/Trace Route value is neither blank, '-', nor an IPv4 address."""

    def __init__(self, raw_text: str, details: Optional[dict] = None):
        super().__init__(f"Invalid ping address: '{raw_text}'", details)
        self.raw_text = raw_text


# --- Network: raised by the Fetcher ---

class FetchError(DataCenterParserError):
    """Raised when the data center page cannot be retrieved."""

    def __init__(self, message: str, url: str, details: Optional[dict] = None):
        super().__init__(message, details)
        self.url = url


class ResponseBodyInvalid(FetchError):
    """Raised when the response body is not valid UTF-8."""
    pass
