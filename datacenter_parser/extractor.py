"""
Rule-based data center extractor.

Turns the data center listing page into DataCenter records.  Each
location block on the page holds an id, a city label and a table of
labeled rows; every row is a label / spacer / value triple and the
label decides how the value cell is read.

Input:  HTML string (UTF-8 text of the whole page)
Output: list[DataCenter] in document order, or the first ExtractionError
"""

from ipaddress import IPv4Address
from typing import Optional

import soupsieve
from bs4 import BeautifulSoup

from .schemas import AvailableService, DataCenter
from .exceptions import (
    CityMissing,
    ExtractionError,
    IdMissing,
    InvalidPingAddress,
    RowShapeInvalid,
)
from .logger import get_module_logger

logger = get_module_logger("extractor")

# Compiled once; soupsieve patterns are immutable and safe to share.
LOCATION_SELECTOR = soupsieve.compile("div.location")
CITY_SELECTOR = soupsieve.compile(".dc-city")
ROW_SELECTOR = soupsieve.compile("table tr")
CELL_SELECTOR = soupsieve.compile("td")
LINK_SELECTOR = soupsieve.compile("a")
DETAIL_LINK_SELECTOR = soupsieve.compile(".popover-container a")

# Row labels as they appear in the first cell
LABEL_AVAILABLE_SERVICES = "Available Services"
LABEL_AVAILABLE_NETWORKS = "Available Networks"
LABEL_BANDWIDTH = "Standard Bare Metal Bandwidth"
LABEL_PING = "Ping/Trace Route"
LABEL_CERTIFICATIONS = "Certifications"
LABEL_TEST_DOWNLOAD = "Test Download"

# Label, spacer, value
ROW_CELL_COUNT = 3

PING_PLACEHOLDER = "-"


class _RowFields:
    """Mutable accumulator for the optional fields of one location block."""

    def __init__(self):
        self.available_services: list[AvailableService] = []
        self.standard_bare_metal_bandwidth: Optional[str] = None
        self.ping: Optional[IPv4Address] = None
        self.test_download: Optional[str] = None


class Extractor:
    """Extracts DataCenter records from the data center listing page."""

    def __init__(self, parser: str = "html5lib"):
        self.parser = parser
        # None marks a known label with nothing to read; unlisted labels are ignored
        self._row_handlers = {
            LABEL_AVAILABLE_SERVICES: self._read_available_services,
            LABEL_BANDWIDTH: self._read_bandwidth,
            LABEL_PING: self._read_ping,
            LABEL_TEST_DOWNLOAD: self._read_test_download,
            LABEL_AVAILABLE_NETWORKS: None,
            LABEL_CERTIFICATIONS: None,
        }

    def extract(self, html: str) -> list[DataCenter]:
        """
        Extract every data center on the page.

        Args:
            html: HTML document text

        Returns:
            DataCenter records in document order (empty if the page has
            no location blocks)

        Raises:
            ExtractionError: on the first malformed location block
        """
        logger.info("Starting extraction")
        soup = BeautifulSoup(html, self.parser)

        data_centers = []
        for location in LOCATION_SELECTOR.select(soup):
            try:
                data_centers.append(self._extract_location(location))
            except ExtractionError as e:
                logger.error(f"Extraction failed: {e}")
                raise

        logger.info(f"Extracted {len(data_centers)} data centers")
        return data_centers

    def _extract_location(self, location) -> DataCenter:
        """Build one DataCenter from a location block."""
        location_id = location.get("id")
        if not location_id:
            raise IdMissing(details={"block": _describe(location)})

        city_elem = CITY_SELECTOR.select_one(location)
        city = _text(city_elem) if city_elem is not None else ""
        if not city:
            raise CityMissing(location_id)

        fields = _RowFields()
        for row in ROW_SELECTOR.select(location):
            # One past the expected count is enough to tell the row is too wide
            cells = CELL_SELECTOR.select(row, limit=ROW_CELL_COUNT + 1)
            if len(cells) != ROW_CELL_COUNT:
                raise RowShapeInvalid(
                    location_id,
                    len(cells),
                    details={"row": _describe(row)}
                )

            label_cell, _, value_cell = cells
            label = _text(label_cell)
            if label not in self._row_handlers:
                logger.debug(f"{location_id}: ignoring row '{label}'")
                continue
            handler = self._row_handlers[label]
            if handler is not None:
                handler(value_cell, fields)

        detail_link = DETAIL_LINK_SELECTOR.select_one(location)
        url = detail_link.get("href") if detail_link is not None else None

        logger.debug(f"Extracted location '{location_id}' ({city})")
        return DataCenter(
            id=location_id,
            city=city,
            available_services=fields.available_services,
            standard_bare_metal_bandwidth=fields.standard_bare_metal_bandwidth,
            ping=fields.ping,
            test_download=fields.test_download,
            url=url,
        )

    def _read_available_services(self, value_cell, fields: _RowFields) -> None:
        for link in LINK_SELECTOR.select(value_cell):
            title = link.get("title")
            if title is None:
                continue
            fields.available_services.append(AvailableService.from_title(title))

    def _read_bandwidth(self, value_cell, fields: _RowFields) -> None:
        value = _text(value_cell)
        if value:
            fields.standard_bare_metal_bandwidth = value

    def _read_ping(self, value_cell, fields: _RowFields) -> None:
        value = _text(value_cell)
        if value in ("", PING_PLACEHOLDER):
            return
        try:
            fields.ping = IPv4Address(value)
        except ValueError:
            raise InvalidPingAddress(value) from None

    def _read_test_download(self, value_cell, fields: _RowFields) -> None:
        # Inner markup, not text: a link with no text still counts as content
        if not value_cell.decode_contents().strip():
            return
        link = LINK_SELECTOR.select_one(value_cell)
        if link is not None and link.get("href") is not None:
            fields.test_download = link.get("href")


def _text(elem) -> str:
    """Text content with surrounding whitespace trimmed."""
    return elem.get_text().strip()


def _describe(elem, limit: int = 200) -> str:
    """Short markup snippet for error details."""
    markup = str(elem)
    return markup if len(markup) <= limit else markup[:limit] + "..."


def extract(html: str) -> list[DataCenter]:
    """Convenience function to extract data centers from HTML."""
    return Extractor().extract(html)
