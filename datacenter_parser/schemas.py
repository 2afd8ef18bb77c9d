"""
Pydantic schemas for extracted data center records.

DataCenter: one record per location block, the Extractor's output
AvailableService: closed vocabulary of hosting services a location offers
"""

from enum import Enum
from ipaddress import IPv4Address
from typing import Optional

from pydantic import BaseModel, Field

from .exceptions import UnknownService


class AvailableService(str, Enum):
    """Hosting services, valued by the link title used on the page."""
    BARE_METAL_SERVERS = "Bare Metal Servers"
    VIRTUAL_SERVERS = "Virtual Servers"
    PRIVATE_CLOUD = "Private Cloud"

    @classmethod
    def from_title(cls, title: str) -> "AvailableService":
        """Map a link title to a service; unknown titles raise UnknownService."""
        try:
            return cls(title)
        except ValueError:
            raise UnknownService(title) from None


class DataCenter(BaseModel):
    """A single data center location."""
    id: str = Field(min_length=1, description="Location id from the block's id attribute")
    city: str = Field(min_length=1)
    available_services: list[AvailableService] = Field(default_factory=list)  # Document order, duplicates kept
    standard_bare_metal_bandwidth: Optional[str] = None  # Free-text tier, e.g. "100TB"
    ping: Optional[IPv4Address] = None
    test_download: Optional[str] = None
    url: Optional[str] = None  # Detail page
