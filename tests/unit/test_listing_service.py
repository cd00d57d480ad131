"""
Unit tests for listing normalization, filtering and the remote feed client.
"""
import httpx
import pytest

from pawfam.core.listing_client import VendorListingClient
from pawfam.schemas.adoption import (
    AnonymousListing,
    NestedVendorListing,
    ShelterListing,
    VendorNameListing,
)
from pawfam.services.listing_service import (
    FALLBACK_LISTINGS,
    PLACEHOLDER_IMAGE,
    ListingService,
    filter_listings,
    normalize_listing,
    normalize_records,
    parse_listing,
)


class StubAdoptionRepository:
    def list_pets(self, session):
        return []


class StubListingClient:
    def __init__(self, records):
        self.records = records

    def fetch(self):
        return list(self.records)


class TestParseListing:
    def test_shelter_string(self):
        raw = parse_listing({"name": "Rex", "shelter": "Happy Tails"})
        assert isinstance(raw, ShelterListing)

    def test_shelter_object(self):
        raw = parse_listing({"name": "Rex", "shelter": {"location": "Pune"}})
        assert isinstance(raw, ShelterListing)

    def test_vendor_name(self):
        raw = parse_listing({"name": "Rex", "vendorName": "Paws Co"})
        assert isinstance(raw, VendorNameListing)

    def test_nested_vendor(self):
        raw = parse_listing({"name": "Rex", "vendor": {"vendorName": "Paws Co"}})
        assert isinstance(raw, NestedVendorListing)

    def test_no_identity(self):
        assert isinstance(parse_listing({"name": "Rex"}), AnonymousListing)

    def test_shelter_takes_precedence_over_vendor_name(self):
        raw = parse_listing({"shelter": "A", "vendorName": "B"})
        assert normalize_listing(raw).shelter == "A"

    def test_empty_shelter_falls_through_to_vendor_name(self):
        raw = parse_listing({"shelter": "", "vendorName": "B"})
        assert normalize_listing(raw).shelter == "B"

    def test_non_mapping_is_rejected(self):
        assert parse_listing(["not", "a", "record"]) is None


class TestNormalizeListing:
    def test_alias_fields_are_mapped(self):
        raw = parse_listing(
            {
                "_id": "abc",
                "title": "Milo",
                "animalType": "Cat",
                "breedName": "Persian",
                "ageInfo": "3 years",
                "details": "Calm lap cat",
                "images": ["https://img/1.png", "https://img/2.png"],
                "vendor": {"name": "Cat Haven"},
            }
        )
        pet = normalize_listing(raw)

        assert pet.id == "abc"
        assert pet.name == "Milo"
        assert pet.type == "Cat"
        assert pet.breed == "Persian"
        assert pet.age == "3 years"
        assert pet.description == "Calm lap cat"
        assert pet.image == "https://img/1.png"
        assert pet.shelter == "Cat Haven"

    def test_defaults_for_sparse_record(self):
        pet = normalize_listing(parse_listing({"id": 7}))

        assert pet.id == "7"
        assert pet.name == "Unnamed Pet"
        assert pet.type == "Pet"
        assert pet.status == "Available"
        assert pet.shelter == "Vendor"
        assert pet.image == PLACEHOLDER_IMAGE

    def test_missing_id_gets_generated(self):
        first = normalize_listing(parse_listing({"name": "A"}))
        second = normalize_listing(parse_listing({"name": "A"}))
        assert first.id and second.id and first.id != second.id

    def test_shelter_object_without_names_is_vendor(self):
        pet = normalize_listing(parse_listing({"shelter": {}}))
        assert pet.shelter == "Vendor"

    def test_single_image_used_when_no_gallery(self):
        pet = normalize_listing(parse_listing({"image": "https://img/x.png", "images": []}))
        assert pet.image == "https://img/x.png"

    def test_unknown_records_are_skipped(self):
        pets = normalize_records([{"name": "Ok"}, {"name": {"first": "Rex"}}, {"images": "x.png"}])
        assert [p.name for p in pets] == ["Ok"]

    def test_numeric_fields_are_kept_as_text(self):
        pets = normalize_records(
            [
                {"_id": "a1", "name": "Rex", "type": "Dog", "age": 3, "shelter": "Paws"},
                {"id": 7, "name": "Max", "size": 2, "vendorName": "V"},
                {"title": 101, "ageInfo": 1.5, "vendor": {"name": "Paws Co"}},
            ]
        )

        assert [(p.name, p.age, p.size, p.shelter) for p in pets] == [
            ("Rex", "3", "", "Paws"),
            ("Max", "", "2", "V"),
            ("101", "1.5", "", "Paws Co"),
        ]

    def test_numeric_only_vendor_listing_replaces_fallback(self):
        service = ListingService(
            StubAdoptionRepository(),
            StubListingClient([{"_id": "a1", "name": "Rex", "age": 3, "shelter": "Paws"}]),
        )

        assert [p.name for p in service.collect(session=None)] == ["Rex"]


class TestFilterListings:
    def test_empty_keyword_keeps_all(self):
        assert filter_listings(FALLBACK_LISTINGS, "") == list(FALLBACK_LISTINGS)
        assert filter_listings(FALLBACK_LISTINGS, None) == list(FALLBACK_LISTINGS)

    @pytest.mark.parametrize(
        "keyword,expected",
        [
            ("golden", ["Buddy"]),
            ("CAT", ["Luna"]),
            ("rescue center", ["Luna"]),
            ("male", ["Buddy", "Luna"]),
            ("loving home", ["Buddy"]),
            ("parrot", []),
        ],
    )
    def test_substring_match_over_fields(self, keyword, expected):
        result = filter_listings(FALLBACK_LISTINGS, keyword)
        assert [p.name for p in result] == expected


class TestVendorListingClient:
    def _client(self, handler) -> VendorListingClient:
        return VendorListingClient(
            url="https://vendors.example.com/pets",
            transport=httpx.MockTransport(handler),
        )

    def test_not_configured_returns_empty(self):
        assert VendorListingClient(url=None).fetch() == []

    def test_fetches_array(self):
        client = self._client(lambda request: httpx.Response(200, json=[{"name": "Rex"}, "junk"]))
        assert client.fetch() == [{"name": "Rex"}]

    def test_accepts_wrapped_payload(self):
        client = self._client(lambda request: httpx.Response(200, json={"pets": [{"name": "Rex"}]}))
        assert client.fetch() == [{"name": "Rex"}]

    def test_http_error_yields_empty(self):
        client = self._client(lambda request: httpx.Response(503))
        assert client.fetch() == []

    def test_invalid_json_yields_empty(self):
        client = self._client(lambda request: httpx.Response(200, content=b"<html>"))
        assert client.fetch() == []

    def test_transport_error_yields_empty(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        assert self._client(handler).fetch() == []
