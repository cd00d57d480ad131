# pawfam/schemas/adoption.py
import datetime as dt
import uuid
from typing import Annotated, Literal, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    EmailStr,
    StringConstraints,
    field_validator,
)
from pydantic import Field as PydanticField
from sqlmodel import SQLModel, Field

ExperienceLevel = Literal["first-time", "some-experience", "experienced", "professional"]
YesNo = Literal["yes", "no"]

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


# ---------------------------------------------------------------------------
# Canonical listing shape returned by GET /adoption/pets
# ---------------------------------------------------------------------------


class PetListing(SQLModel):
    id: str
    name: str
    type: str
    breed: str = ""
    age: str = ""
    gender: str = ""
    size: str = ""
    description: str = ""
    image: str
    status: str = "Available"
    shelter: str


# ---------------------------------------------------------------------------
# Known external listing shapes
#
# Vendor feeds disagree on field names and on how the shelter / vendor is
# identified. Each identity convention gets its own model; they are tried
# in order (shelter, vendorName, nested vendor, none).
# ---------------------------------------------------------------------------


class _RawListingBase(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str | None = PydanticField(default=None, validation_alias=AliasChoices("_id", "id"))
    name: str | None = PydanticField(default=None, validation_alias=AliasChoices("name", "title"))
    type: str | None = PydanticField(
        default=None,
        validation_alias=AliasChoices("type", "animalType", "animal_type"),
    )
    breed: str | None = PydanticField(default=None, validation_alias=AliasChoices("breed", "breedName"))
    age: str | None = PydanticField(default=None, validation_alias=AliasChoices("age", "ageInfo"))
    gender: str | None = None
    size: str | None = None
    description: str | None = PydanticField(
        default=None,
        validation_alias=AliasChoices("description", "details"),
    )
    images: list[str] | None = None
    image: str | None = None
    status: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v):
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator(
        "name", "type", "breed", "age", "gender", "size", "description", "image", "status",
        mode="before",
    )
    @classmethod
    def stringify_numbers(cls, v):
        # Feeds send e.g. "age": 3 or "size": 2
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class ShelterInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    location: str | None = None
    address: str | None = None
    vendorName: str | None = None

    def label(self) -> str | None:
        return self.name or self.location or self.address or self.vendorName


class VendorInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    vendorName: str | None = None

    def label(self) -> str | None:
        return self.name or self.vendorName


class ShelterListing(_RawListingBase):
    shelter: NonEmptyStr | ShelterInfo

    @field_validator("shelter", mode="before")
    @classmethod
    def stringify_scalar(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class VendorNameListing(_RawListingBase):
    vendorName: NonEmptyStr


class NestedVendorListing(_RawListingBase):
    vendor: VendorInfo


class AnonymousListing(_RawListingBase):
    pass


RawListing = Annotated[
    Union[ShelterListing, VendorNameListing, NestedVendorListing, AnonymousListing],
    PydanticField(union_mode="left_to_right"),
]


# ---------------------------------------------------------------------------
# Vendor posts
# ---------------------------------------------------------------------------


class VendorPetCreate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=100)
    animal_type: str = Field(max_length=50)
    breed: str = Field(default="", max_length=100)
    age: str = Field(default="", max_length=50)
    gender: str = Field(default="", max_length=20)
    size: str = Field(default="", max_length=20)
    description: str = ""
    image: str | None = None
    shelter: str | None = Field(
        default=None,
        max_length=100,
        description="Display name; defaults to the vendor's username",
    )

    @field_validator("name", "animal_type")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v


class VendorPetRead(SQLModel):
    id: uuid.UUID
    vendor_id: uuid.UUID
    name: str
    animal_type: str
    breed: str
    age: str
    gender: str
    size: str
    description: str
    image: str | None
    status: str
    shelter: str
    created_at: dt.datetime


# ---------------------------------------------------------------------------
# Adoption applications
# ---------------------------------------------------------------------------


class PetSummary(SQLModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    name: str
    type: str
    breed: str = ""
    age: str = ""
    shelter: str = ""


class PersonalInfo(SQLModel):
    model_config = ConfigDict(extra="forbid")

    full_name: str = Field(max_length=100)
    email: EmailStr
    phone: str = Field(max_length=20)
    address: str

    @field_validator("full_name", "phone", "address")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v


class ExperienceInfo(SQLModel):
    model_config = ConfigDict(extra="forbid")

    level: ExperienceLevel
    details: str | None = None
    other_pets: YesNo | None = None
    other_pets_details: str | None = None


class VisitSchedule(SQLModel):
    model_config = ConfigDict(extra="forbid")

    date: dt.date
    time: dt.time


class AdoptionApplicationCreate(SQLModel):
    """
    Nested payload posted by the adoption form.

    Backend derives:
      - user_id from token
      - status = 'pending'
    """

    model_config = ConfigDict(extra="forbid")

    pet: PetSummary
    personal_info: PersonalInfo
    experience: ExperienceInfo
    visit_schedule: VisitSchedule
    adoption_reason: str

    @field_validator("adoption_reason")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("adoption_reason cannot be empty")
        return v


class AdoptionApplicationRead(SQLModel):
    id: uuid.UUID
    user_id: uuid.UUID
    pet_id: str
    pet_name: str
    pet_type: str
    pet_breed: str
    pet_age: str
    pet_shelter: str
    full_name: str
    email: str
    phone: str
    address: str
    experience_level: str
    experience_details: str | None
    other_pets: str | None
    other_pets_details: str | None
    visit_date: dt.date
    visit_time: dt.time
    adoption_reason: str
    status: str
    created_at: dt.datetime
