"""
Catalog entities shown on the marketing site.

Each entity has an ``Insert*`` model with the caller-supplied fields and a
stored model that adds the identifier assigned by the store.
"""
from pydantic import BaseModel, Field
from enum import Enum


class Destination(str, Enum):
    """Destinations covered by the gallery."""
    KASHI = "Kashi"
    VARANASI = "Varanasi"
    NEPAL = "Nepal"
    AYODHYA = "Ayodhya"
    ALLAHABAD = "Allahabad"
    GAYA = "Gaya"


class GalleryCategory(str, Enum):
    """Gallery photo categories."""
    TEMPLES = "Temples"
    GHATS = "Ghats"
    RITUALS = "Rituals"
    BUDDHIST = "Buddhist"


class InsertPackage(BaseModel):
    """A tour package before it is stored."""
    title: str = Field(..., description="Package name")
    duration: str = Field(..., description="Nights/days, e.g. '3N/4D'")
    image: str = Field(..., description="Cover image URL")
    description: str = Field(..., description="Short marketing description")
    itinerary: list[str] = Field(
        default_factory=list,
        description="Day-by-day plan, in order"
    )
    highlights: list[str] = Field(
        default_factory=list,
        description="Key attractions, in order"
    )
    price: int = Field(..., ge=0, description="Price per person in rupees")


class Package(InsertPackage):
    id: str


class InsertTestimonial(BaseModel):
    """A customer quote before it is stored."""
    name: str
    quote: str
    image: str


class Testimonial(InsertTestimonial):
    id: str


class InsertService(BaseModel):
    """An agency service before it is stored."""
    title: str
    description: str
    icon: str = Field(..., description="Icon tag used by the frontend")


class Service(InsertService):
    id: str


class InsertGalleryItem(BaseModel):
    """A gallery photo before it is stored."""
    image: str
    destination: Destination
    category: GalleryCategory


class GalleryItem(InsertGalleryItem):
    id: str
