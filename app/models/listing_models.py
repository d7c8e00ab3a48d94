"""
app/models/listing_models.py

Pydantic DTOs for registering and listing catalog entries.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator

from app.catalog.base import ServiceListing


class ListingCreate(BaseModel):
    """
    One listing in the JSON body of POST /services/.

        {
            "id": "svc-1",
            "name": "Deep House Cleaning",
            "description": "Professional house cleaning service",
            "category": "cleaning",
            "tags": ["home", "cleaning"],
            "provider_name": "Clean Pro"
        }
    """

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    category: str = Field(min_length=1)
    tags: List[str] = Field(default_factory=list)
    price: float = Field(default=0.0, ge=0)
    duration: int = Field(default=0, ge=0, description="Duration in minutes.")
    location: str = ""
    rating: float = Field(default=0.0, ge=0, le=5)
    review_count: int = Field(default=0, ge=0)
    provider_name: str = ""
    is_active: bool = True

    @field_validator("id", "name", "description", "category")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Field cannot be blank.")
        return v.strip()

    @field_validator("tags")
    @classmethod
    def drop_blank_tags(cls, v: List[str]) -> List[str]:
        return [tag.strip() for tag in v if tag.strip()]

    def to_listing(self) -> ServiceListing:
        return ServiceListing(**self.model_dump())


class ListingSummary(BaseModel):
    """A catalog entry as returned by GET /services/."""

    id: str
    name: str
    category: str
    tags: List[str]
    provider_name: str
    is_active: bool


class ListingsResponse(BaseModel):
    """Response for GET /services/."""

    services: List[ListingSummary]


class RegisterListingsResponse(BaseModel):
    """
    Successful response for POST /services/.

        {
            "message": "Registered 2 service listing(s).",
            "ids": ["svc-1", "svc-2"]
        }
    """

    message: str
    ids: List[str]
