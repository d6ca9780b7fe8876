import re
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import ClassVar, List, Literal, Optional, Tuple
from app.models.destination import Currency
from app.models.partialUpdate import PartialUpdate

Difficulty = Literal["Easy", "Moderate", "Challenging"]
PackageCategory = Literal["Adventure", "Cultural", "Relaxation", "Wildlife", "Honeymoon", "Family", "Luxury"]
Meal = Literal["Breakfast", "Lunch", "Dinner", "Snacks"]

HTTP_URL_PATTERN = re.compile(r"^https?://.+")

PACKAGE_REQUIRED_FIELDS = [
    "title",
    "destination",
    "duration",
    "price",
    "description",
    "difficulty",
    "groupSize",
    "departureDate",
    "category",
]


class ItineraryDay(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    day: int = Field(..., ge=1)
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=1000)
    activities: List[str] = Field(default_factory=list)
    meals: List[Meal] = Field(default_factory=list)
    accommodation: Optional[str] = Field(None, max_length=200)


class GroupSize(BaseModel):
    min: int = Field(..., ge=1)
    max: int = Field(..., ge=1)

    @model_validator(mode="after")
    def check_bounds(self):
        if self.min > self.max:
            raise ValueError("Minimum group size cannot be greater than maximum group size")
        return self


class TourPackage(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=200)
    destination: str = Field(..., min_length=1, max_length=100)
    duration: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    originalPrice: Optional[float] = Field(None, ge=0)
    currency: Currency = "USD"
    images: List[str] = Field(default_factory=list)
    description: str = Field(..., min_length=1, max_length=2000)
    highlights: List[str] = Field(default_factory=list)
    inclusions: List[str] = Field(default_factory=list)
    exclusions: List[str] = Field(default_factory=list)
    itinerary: List[ItineraryDay] = Field(default_factory=list)
    difficulty: Difficulty
    groupSize: GroupSize
    departureDate: str = Field(..., min_length=1)
    availableDates: List[str] = Field(default_factory=list)
    category: PackageCategory
    rating: float = Field(0, ge=0, le=5)
    reviewCount: int = Field(0, ge=0)
    featured: bool = False

    @model_validator(mode="after")
    def check_list_items(self):
        for url in self.images:
            if not HTTP_URL_PATTERN.match(url):
                raise ValueError("Image must be a valid URL")
        for label, items in (("Highlight", self.highlights), ("Inclusion", self.inclusions), ("Exclusion", self.exclusions)):
            if any(len(item) > 200 for item in items):
                raise ValueError(f"{label} cannot exceed 200 characters")
        return self


class TourPackageUpdate(PartialUpdate):
    nullable_fields: ClassVar[Tuple[str, ...]] = ("originalPrice",)

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    destination: Optional[str] = Field(None, min_length=1, max_length=100)
    duration: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0)
    originalPrice: Optional[float] = Field(None, ge=0)
    currency: Optional[Currency] = None
    images: Optional[List[str]] = None
    description: Optional[str] = Field(None, min_length=1, max_length=2000)
    highlights: Optional[List[str]] = None
    inclusions: Optional[List[str]] = None
    exclusions: Optional[List[str]] = None
    itinerary: Optional[List[ItineraryDay]] = None
    difficulty: Optional[Difficulty] = None
    groupSize: Optional[GroupSize] = None
    departureDate: Optional[str] = Field(None, min_length=1)
    availableDates: Optional[List[str]] = None
    category: Optional[PackageCategory] = None
    rating: Optional[float] = Field(None, ge=0, le=5)
    reviewCount: Optional[int] = Field(None, ge=0)
    featured: Optional[bool] = None

    @model_validator(mode="after")
    def check_images(self):
        for url in self.images or []:
            if not HTTP_URL_PATTERN.match(url):
                raise ValueError("Image must be a valid URL")
        return self
