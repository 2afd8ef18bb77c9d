"""
Main orchestrator for the data center parser.

Wires the Fetcher (network) to the Extractor (pure parsing).  The
extractor never sees a URL; the page address lives in Settings and
only the fetcher uses it.
"""

from pathlib import Path
from typing import Optional, Union

from .config import Settings
from .extractor import Extractor
from .fetcher import Fetcher
from .schemas import DataCenter
from .logger import get_module_logger, setup_logger

logger = get_module_logger("main")


class DataCenterScraper:
    """
    Fetches the data center page and extracts its records.

    1. Fetcher: GET the page, decode UTF-8
    2. Extractor: location blocks → DataCenter records
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        fetcher: Optional[Fetcher] = None,
        extractor: Optional[Extractor] = None
    ):
        self.settings = settings or Settings()
        setup_logger(level=self.settings.log_level_value)

        self.fetcher = fetcher or Fetcher(self.settings)
        self.extractor = extractor or Extractor()

    def scrape(self, url: Optional[str] = None) -> list[DataCenter]:
        """Fetch the page and extract its data centers."""
        html = self.fetcher.fetch(url)
        data_centers = self.parse(html)
        logger.info(f"Complete: {len(data_centers)} data centers")
        return data_centers

    def parse(self, html: str) -> list[DataCenter]:
        """Extract data centers from already fetched HTML."""
        return self.extractor.extract(html)

    def parse_file(self, file_path: Union[str, Path]) -> list[DataCenter]:
        """Extract data centers from a saved copy of the page."""
        file_path = Path(file_path)
        logger.info(f"Reading {file_path}")
        return self.parse(file_path.read_text(encoding="utf-8"))


def scrape_data_centers(url: Optional[str] = None, settings: Optional[Settings] = None) -> list[DataCenter]:
    """Convenience function to fetch and extract data centers."""
    return DataCenterScraper(settings=settings).scrape(url)


def parse_data_centers_file(file_path: Union[str, Path]) -> list[DataCenter]:
    """Convenience function to extract data centers from an HTML file."""
    return DataCenterScraper().parse_file(file_path)
