"""
Data Center Parser

Extracts the hosting provider's data center locations from its public
listing page.
- Fetcher: GET the page with a timeout
- Extractor: turn location blocks into DataCenter records

Public API surface:
  Pipeline classes  — DataCenterScraper, Fetcher, Extractor
  Data models       — DataCenter, AvailableService
  Configuration     — Settings
  Error types       — ExtractionError and its subclasses (page format changed),
                      FetchError (network)
"""

# --- Pipeline classes ---
from .main import DataCenterScraper, scrape_data_centers, parse_data_centers_file
from .fetcher import Fetcher
from .extractor import Extractor, extract

# --- Data models ---
from .schemas import DataCenter, AvailableService

# --- Configuration ---
from .config import Settings

# --- Exceptions ---
from .exceptions import (
    DataCenterParserError,
    ExtractionError,
    IdMissing,
    CityMissing,
    RowShapeInvalid,
    UnknownService,
    InvalidPingAddress,
    FetchError,
    ResponseBodyInvalid,
)

__version__ = "0.1.0"
__all__ = [
    "DataCenterScraper",
    "scrape_data_centers",
    "parse_data_centers_file",
    "Fetcher",
    "Extractor",
    "extract",
    "DataCenter",
    "AvailableService",
    "Settings",
    "DataCenterParserError",
    "ExtractionError",
    "IdMissing",
    "CityMissing",
    "RowShapeInvalid",
    "UnknownService",
    "InvalidPingAddress",
    "FetchError",
    "ResponseBodyInvalid",
]
