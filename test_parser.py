"""
Tests for the data center extractor.

Most cases build a single location block inline; the end-to-end case
uses the saved sample page in test_data/.
"""

from ipaddress import IPv4Address
from pathlib import Path

import pytest

from datacenter_parser.extractor import Extractor, extract
from datacenter_parser.schemas import AvailableService, DataCenter
from datacenter_parser.exceptions import (
    CityMissing,
    ExtractionError,
    IdMissing,
    InvalidPingAddress,
    RowShapeInvalid,
    UnknownService,
)

SAMPLE_PAGE = Path(__file__).parent / "test_data" / "data-centers.html"


def row(label: str, value: str = "", spacer: str = ":") -> str:
    return f"<tr><td>{label}</td><td>{spacer}</td><td>{value}</td></tr>"


def location(rows: str = "", id_attr: str = 'id="london"',
             city: str = '<span class="dc-city">London</span>', extra: str = "") -> str:
    return (
        f'<div class="location" {id_attr}>{city}'
        f"<table>{rows}</table>{extra}</div>"
    )


def page(*blocks: str) -> str:
    return "<html><body>" + "".join(blocks) + "</body></html>"


@pytest.fixture
def extractor():
    return Extractor()


class TestLocationBlocks:
    """Block enumeration, id and city."""

    def test_no_location_blocks(self, extractor):
        assert extractor.extract(page("<p>Nothing here</p>")) == []

    def test_empty_document(self, extractor):
        assert extractor.extract("") == []

    def test_minimal_block(self, extractor):
        result = extractor.extract(page(location()))

        assert result == [DataCenter(id="london", city="London")]
        assert result[0].available_services == []
        assert result[0].ping is None
        assert result[0].url is None

    def test_blocks_in_document_order(self, extractor):
        html = page(
            location(id_attr='id="tokyo"', city='<b class="dc-city">Tokyo</b>'),
            location(id_attr='id="dallas"', city='<b class="dc-city">Dallas</b>'),
        )

        result = extractor.extract(html)

        assert [dc.id for dc in result] == ["tokyo", "dallas"]
        assert [dc.city for dc in result] == ["Tokyo", "Dallas"]

    def test_only_div_location_counts(self, extractor):
        html = page('<section class="location" id="x"></section>', location())

        assert [dc.id for dc in extractor.extract(html)] == ["london"]

    def test_missing_id(self, extractor):
        with pytest.raises(IdMissing):
            extractor.extract(page(location(id_attr="")))

    def test_missing_id_aborts_whole_call(self, extractor):
        html = page(location(), location(id_attr=""))

        with pytest.raises(IdMissing):
            extractor.extract(html)

    def test_missing_city(self, extractor):
        with pytest.raises(CityMissing) as exc_info:
            extractor.extract(page(location(city="")))

        assert exc_info.value.location_id == "london"

    def test_blank_city_counts_as_missing(self, extractor):
        with pytest.raises(CityMissing):
            extractor.extract(page(location(city='<span class="dc-city">  </span>')))

    def test_first_city_label_wins(self, extractor):
        city = '<span class="dc-city">London</span><span class="dc-city">Docklands</span>'

        assert extractor.extract(page(location(city=city)))[0].city == "London"

    def test_errors_share_base_class(self, extractor):
        with pytest.raises(ExtractionError):
            extractor.extract(page(location(city="")))


class TestRowShape:
    """Every row must be exactly label / spacer / value."""

    def test_two_cells(self, extractor):
        rows = "<tr><td>Ping/Trace Route</td><td>82.163.78.28</td></tr>"

        with pytest.raises(RowShapeInvalid) as exc_info:
            extractor.extract(page(location(rows)))

        assert exc_info.value.cell_count == 2

    def test_four_cells(self, extractor):
        rows = "<tr><td>Ping/Trace Route</td><td>:</td><td>82.163.78.28</td><td>ms</td></tr>"

        with pytest.raises(RowShapeInvalid):
            extractor.extract(page(location(rows)))

    def test_header_row_is_not_skipped(self, extractor):
        rows = "<tr><th>Attribute</th><th></th><th>Value</th></tr>" + row("Standard Bare Metal Bandwidth", "100TB")

        with pytest.raises(RowShapeInvalid) as exc_info:
            extractor.extract(page(location(rows)))

        assert exc_info.value.cell_count == 0

    def test_spacer_cell_is_ignored(self, extractor):
        rows = row("Standard Bare Metal Bandwidth", "100TB", spacer="whatever")

        assert extractor.extract(page(location(rows)))[0].standard_bare_metal_bandwidth == "100TB"

    def test_unknown_and_inert_labels_are_ignored(self, extractor):
        rows = (
            row("Available Networks", "Premium")
            + row("Certifications", "ISO 27001")
            + row("Power", "2N")
        )

        assert extractor.extract(page(location(rows))) == [DataCenter(id="london", city="London")]


class TestAvailableServices:

    def test_services_in_order(self, extractor):
        value = '<a title="Bare Metal Servers"></a><a title="Virtual Servers"></a>'

        result = extractor.extract(page(location(row("Available Services", value))))

        assert result[0].available_services == [
            AvailableService.BARE_METAL_SERVERS,
            AvailableService.VIRTUAL_SERVERS,
        ]

    def test_duplicates_kept(self, extractor):
        value = '<a title="Private Cloud"></a><a title="Private Cloud"></a>'

        result = extractor.extract(page(location(row("Available Services", value))))

        assert result[0].available_services == [AvailableService.PRIVATE_CLOUD] * 2

    def test_links_without_title_skipped(self, extractor):
        value = '<a href="/contact">Ask us</a><a title="Virtual Servers"></a>'

        result = extractor.extract(page(location(row("Available Services", value))))

        assert result[0].available_services == [AvailableService.VIRTUAL_SERVERS]

    def test_unknown_service(self, extractor):
        value = '<a title="Bare Metal Servers"></a><a title="Colocation"></a>'

        with pytest.raises(UnknownService) as exc_info:
            extractor.extract(page(location(row("Available Services", value))))

        assert exc_info.value.title == "Colocation"

    def test_from_title(self):
        assert AvailableService.from_title("Private Cloud") is AvailableService.PRIVATE_CLOUD
        with pytest.raises(UnknownService):
            AvailableService.from_title("private cloud")


class TestScalarFields:

    def test_bandwidth_present(self, extractor):
        result = extractor.extract(page(location(row("Standard Bare Metal Bandwidth", "100TB"))))

        assert result[0].standard_bare_metal_bandwidth == "100TB"

    def test_bandwidth_empty(self, extractor):
        result = extractor.extract(page(location(row("Standard Bare Metal Bandwidth", ""))))

        assert result[0].standard_bare_metal_bandwidth is None

    def test_ping_placeholder(self, extractor):
        result = extractor.extract(page(location(row("Ping/Trace Route", "-"))))

        assert result[0].ping is None

    def test_ping_empty(self, extractor):
        result = extractor.extract(page(location(row("Ping/Trace Route", ""))))

        assert result[0].ping is None

    def test_ping_address(self, extractor):
        result = extractor.extract(page(location(row("Ping/Trace Route", "82.163.78.28"))))

        assert result[0].ping == IPv4Address("82.163.78.28")

    def test_ping_invalid(self, extractor):
        with pytest.raises(InvalidPingAddress) as exc_info:
            extractor.extract(page(location(row("Ping/Trace Route", "not-an-ip"))))

        assert exc_info.value.raw_text == "not-an-ip"

    def test_ping_ipv6_rejected(self, extractor):
        with pytest.raises(InvalidPingAddress):
            extractor.extract(page(location(row("Ping/Trace Route", "2001:db8::1"))))

    def test_test_download_link(self, extractor):
        value = '<a href="http://82.163.78.28/speedtest.256mb">256MB</a>'

        result = extractor.extract(page(location(row("Test Download", value))))

        assert result[0].test_download == "http://82.163.78.28/speedtest.256mb"

    def test_test_download_empty(self, extractor):
        result = extractor.extract(page(location(row("Test Download", ""))))

        assert result[0].test_download is None

    def test_test_download_without_link(self, extractor):
        result = extractor.extract(page(location(row("Test Download", "Coming soon"))))

        assert result[0].test_download is None

    def test_test_download_link_without_href(self, extractor):
        result = extractor.extract(page(location(row("Test Download", "<a>256MB</a>"))))

        assert result[0].test_download is None

    def test_detail_url(self, extractor):
        extra = '<div class="popover-container"><a href="/us/data-center/london">More</a></div>'

        result = extractor.extract(page(location(extra=extra)))

        assert result[0].url == "/us/data-center/london"

    def test_link_outside_popover_is_not_detail_url(self, extractor):
        extra = '<a href="/us/data-center/london">More</a>'

        assert extractor.extract(page(location(extra=extra)))[0].url is None


class TestSamplePage:

    def test_end_to_end(self, extractor):
        result = extractor.extract(SAMPLE_PAGE.read_text(encoding="utf-8"))

        assert len(result) == 2
        london = next(dc for dc in result if dc.id == "london")
        assert london.city == "London"
        assert london.available_services == [
            AvailableService.BARE_METAL_SERVERS,
            AvailableService.VIRTUAL_SERVERS,
        ]
        assert london.standard_bare_metal_bandwidth == "100TB"
        assert london.ping == IPv4Address("82.163.78.28")
        assert london.test_download == "http://82.163.78.28/speedtest.256mb"
        assert london.url == "https://example.com/us/data-center/london"

    def test_blank_fields(self, extractor):
        result = extractor.extract(SAMPLE_PAGE.read_text(encoding="utf-8"))

        assert result[1] == DataCenter(
            id="amsterdam",
            city="Amsterdam",
            available_services=[AvailableService.PRIVATE_CLOUD],
        )

    def test_idempotent(self, extractor):
        html = SAMPLE_PAGE.read_text(encoding="utf-8")

        assert extractor.extract(html) == extractor.extract(html)
        assert extract(html) == extractor.extract(html)

    def test_json_dump(self, extractor):
        london = extractor.extract(SAMPLE_PAGE.read_text(encoding="utf-8"))[0]

        dumped = london.model_dump(mode="json")

        assert dumped["available_services"] == ["Bare Metal Servers", "Virtual Servers"]
        assert dumped["ping"] == "82.163.78.28"
