from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Literal, Optional
from app.models.partialUpdate import PartialUpdate

Region = Literal["Asia", "Europe", "North America", "South America", "Africa", "Oceania"]
Currency = Literal["USD", "EUR", "GBP", "JPY", "CAD", "AUD"]

DESTINATION_REQUIRED_FIELDS = [
    "name",
    "country",
    "region",
    "description",
    "images",
    "highlights",
    "bestTimeToVisit",
    "startingPrice",
    "tags",
    "coordinates",
]


def normalize_tags(tags: Optional[List[str]]) -> Optional[List[str]]:
    if tags is None:
        return None
    return [tag.strip().lower() for tag in tags]


class Coordinates(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class Destination(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)
    country: str = Field(..., min_length=1, max_length=50)
    region: Region
    description: str = Field(..., min_length=1, max_length=1000)
    images: List[str] = Field(..., min_length=1)
    highlights: List[str] = Field(..., min_length=1)
    bestTimeToVisit: str = Field(..., min_length=1)
    averageRating: float = Field(0, ge=0, le=5)
    reviewCount: int = Field(0, ge=0)
    startingPrice: float = Field(..., ge=0)
    currency: Currency = "USD"
    tags: List[str] = Field(..., min_length=1)
    coordinates: Coordinates
    featured: bool = False
    isActive: bool = True

    @field_validator("tags")
    @classmethod
    def lowercase_tags(cls, tags):
        return normalize_tags(tags)


class DestinationUpdate(PartialUpdate):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    country: Optional[str] = Field(None, min_length=1, max_length=50)
    region: Optional[Region] = None
    description: Optional[str] = Field(None, min_length=1, max_length=1000)
    images: Optional[List[str]] = Field(None, min_length=1)
    highlights: Optional[List[str]] = Field(None, min_length=1)
    bestTimeToVisit: Optional[str] = Field(None, min_length=1)
    averageRating: Optional[float] = Field(None, ge=0, le=5)
    reviewCount: Optional[int] = Field(None, ge=0)
    startingPrice: Optional[float] = Field(None, ge=0)
    currency: Optional[Currency] = None
    tags: Optional[List[str]] = Field(None, min_length=1)
    coordinates: Optional[Coordinates] = None
    featured: Optional[bool] = None
    isActive: Optional[bool] = None

    @field_validator("tags")
    @classmethod
    def lowercase_tags(cls, tags):
        return normalize_tags(tags)
