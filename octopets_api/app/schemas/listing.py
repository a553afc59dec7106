"""
Pydantic schemas for listings.

A listing describes a pet friendly venue (a park, cafe, hotel...).
Only ``name`` is required; the remaining attributes are optional and
passed through to the repository unchanged.  ``ListingCreate`` is the
write payload for both creating and replacing a listing; ``ListingRead``
adds the identifier assigned by the repository.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class ListingCreate(BaseModel):
    """Schema for creating or replacing a listing."""

    name: str = Field(..., min_length=1, description="Display name of the venue")
    type: Optional[str] = Field(None, description="Kind of venue, e.g. park, cafe or hotel")
    description: Optional[str] = Field(None, description="Free text description")
    address: Optional[str] = Field(None, description="Street address")
    allowed_pets: List[str] = Field(default_factory=list, description="Pet kinds welcome at the venue")
    amenities: List[str] = Field(default_factory=list, description="Amenities offered, e.g. water bowls")
    rating: Optional[float] = Field(None, ge=0, le=5, description="Average rating from 0 to 5")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name must not be blank")
        return v


class ListingRead(ListingCreate):
    """Schema for reading a listing."""

    id: int = Field(..., description="Identifier assigned by the repository")
