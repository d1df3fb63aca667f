"""Data models for the Yatra site."""
from .catalog import (
    Destination,
    GalleryCategory,
    InsertPackage,
    Package,
    InsertTestimonial,
    Testimonial,
    InsertService,
    Service,
    InsertGalleryItem,
    GalleryItem,
)
from .contact import ContactForm
from .user import InsertUser, User

__all__ = [
    "Destination",
    "GalleryCategory",
    "InsertPackage",
    "Package",
    "InsertTestimonial",
    "Testimonial",
    "InsertService",
    "Service",
    "InsertGalleryItem",
    "GalleryItem",
    "ContactForm",
    "InsertUser",
    "User",
]
