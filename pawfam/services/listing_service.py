# pawfam/services/listing_service.py
import logging
import uuid
from collections.abc import Iterable
from typing import Any

from pydantic import TypeAdapter, ValidationError
from sqlmodel import Session

from pawfam.core.listing_client import VendorListingClient
from pawfam.repositories.adoption_repo import AdoptionRepository
from pawfam.schemas.adoption import (
    AnonymousListing,
    NestedVendorListing,
    PetListing,
    RawListing,
    ShelterListing,
    VendorNameListing,
)

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE = "https://placehold.co/300x300/9ca3af/ffffff?text=Pet"
DEFAULT_SHELTER = "Vendor"

# Shown until at least one vendor listing exists
FALLBACK_LISTINGS: tuple[PetListing, ...] = (
    PetListing(
        id="1",
        name="Buddy",
        type="Dog",
        breed="Golden Retriever",
        age="2 years",
        gender="Male",
        size="Large",
        description=(
            "Friendly and energetic golden retriever looking for a loving home. "
            "Great with kids and other pets."
        ),
        image="https://placehold.co/300x300/f59e0b/ffffff?text=Buddy",
        status="Available",
        shelter="Happy Paws Shelter",
    ),
    PetListing(
        id="2",
        name="Luna",
        type="Cat",
        breed="Siamese",
        age="1.5 years",
        gender="Female",
        size="Small",
        description="Gentle and affectionate Siamese cat. Loves cuddles and quiet environments.",
        image="https://placehold.co/300x300/3b82f6/ffffff?text=Luna",
        status="Available",
        shelter="Cat Rescue Center",
    ),
)

SEARCH_FIELDS = ("name", "type", "breed", "age", "gender", "size", "shelter", "description")

_raw_listing_adapter = TypeAdapter(RawListing)


def parse_listing(record: dict[str, Any]) -> RawListing | None:
    """Match a raw record against the known shapes; None if none fits."""
    try:
        return _raw_listing_adapter.validate_python(record)
    except ValidationError:
        return None


def _shelter_label(raw: RawListing) -> str:
    if isinstance(raw, ShelterListing):
        if isinstance(raw.shelter, str):
            return raw.shelter
        return raw.shelter.label() or DEFAULT_SHELTER
    if isinstance(raw, VendorNameListing):
        return raw.vendorName
    if isinstance(raw, NestedVendorListing):
        return raw.vendor.label() or DEFAULT_SHELTER
    return DEFAULT_SHELTER


def normalize_listing(raw: RawListing) -> PetListing:
    """Map any known listing shape onto the canonical PetListing."""
    if raw.images:
        image = raw.images[0]
    else:
        image = raw.image or PLACEHOLDER_IMAGE

    return PetListing(
        id=raw.id or str(uuid.uuid4()),
        name=raw.name or "Unnamed Pet",
        type=raw.type or "Pet",
        breed=raw.breed or "",
        age=raw.age or "",
        gender=raw.gender or "",
        size=raw.size or "",
        description=raw.description or "",
        image=image,
        status=raw.status or "Available",
        shelter=_shelter_label(raw),
    )


def normalize_records(records: Iterable[dict[str, Any]]) -> list[PetListing]:
    listings: list[PetListing] = []
    for record in records:
        raw = parse_listing(record)
        if raw is None:
            logger.debug("Skipping listing record of unknown shape: %r", record)
            continue
        listings.append(normalize_listing(raw))
    return listings


def filter_listings(listings: Iterable[PetListing], keyword: str | None) -> list[PetListing]:
    """
    Case-insensitive substring match over the descriptive fields.
    An empty keyword keeps everything.
    """
    if not keyword:
        return list(listings)

    needle = keyword.lower()
    return [
        pet
        for pet in listings
        if any(needle in (getattr(pet, field) or "").lower() for field in SEARCH_FIELDS)
    ]


class ListingService:
    """
    Builds the public adoption catalogue.

    Sources, in order:
      1. vendor posts stored locally
      2. the remote vendor feed (if configured)
    When both are empty the fallback pair is served.
    """

    def __init__(self, repo: AdoptionRepository, client: VendorListingClient):
        self.repo = repo
        self.client = client

    def collect(self, session: Session) -> list[PetListing]:
        records: list[dict[str, Any]] = [
            pet.model_dump(mode="json") for pet in self.repo.list_pets(session)
        ]
        records.extend(self.client.fetch())

        listings = normalize_records(records)
        if not listings:
            return list(FALLBACK_LISTINGS)
        return listings

    def search(self, session: Session, keyword: str | None = None) -> list[PetListing]:
        return filter_listings(self.collect(session), keyword)
