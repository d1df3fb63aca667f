"""
Storage layer - In-memory source of truth for catalog entities.

State lives for the lifetime of the process only. Every read returns a
copy, so handlers can never mutate what the store holds.
"""
from abc import ABC, abstractmethod
from typing import Optional, TypeVar
import logging
import uuid

from pydantic import BaseModel

from ..models import (
    ContactForm,
    GalleryItem,
    InsertGalleryItem,
    InsertPackage,
    InsertService,
    InsertTestimonial,
    InsertUser,
    Package,
    Service,
    Testimonial,
    User,
)
from . import seed_data

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)


class Storage(ABC):
    """Operations the API needs from a store."""

    @abstractmethod
    async def get_user(self, user_id: str) -> Optional[User]: ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]: ...

    @abstractmethod
    async def get_all_users(self) -> list[User]: ...

    @abstractmethod
    async def create_user(self, user: InsertUser) -> User: ...

    @abstractmethod
    async def get_all_packages(self) -> list[Package]: ...

    @abstractmethod
    async def get_package(self, package_id: str) -> Optional[Package]: ...

    @abstractmethod
    async def create_package(self, package: InsertPackage) -> Package: ...

    @abstractmethod
    async def get_all_testimonials(self) -> list[Testimonial]: ...

    @abstractmethod
    async def get_testimonial(self, testimonial_id: str) -> Optional[Testimonial]: ...

    @abstractmethod
    async def create_testimonial(self, testimonial: InsertTestimonial) -> Testimonial: ...

    @abstractmethod
    async def get_all_gallery_items(self) -> list[GalleryItem]: ...

    @abstractmethod
    async def get_gallery_item(self, item_id: str) -> Optional[GalleryItem]: ...

    @abstractmethod
    async def create_gallery_item(self, item: InsertGalleryItem) -> GalleryItem: ...

    @abstractmethod
    async def get_all_services(self) -> list[Service]: ...

    @abstractmethod
    async def get_service(self, service_id: str) -> Optional[Service]: ...

    @abstractmethod
    async def create_service(self, service: InsertService) -> Service: ...

    @abstractmethod
    async def submit_contact_form(self, form: ContactForm) -> None: ...

    @abstractmethod
    def counts(self) -> dict[str, int]: ...


class MemStorage(Storage):
    """
    Dict-backed store.

    Collections keep insertion order. All methods are async for a uniform
    interface but never await anything, so a single event loop needs no
    locking. Creation has no failure path: there are no uniqueness
    constraints on fields and no capacity limit.
    """

    def __init__(self, seed: bool = True):
        self._users: dict[str, User] = {}
        self._packages: dict[str, Package] = {}
        self._testimonials: dict[str, Testimonial] = {}
        self._gallery_items: dict[str, GalleryItem] = {}
        self._services: dict[str, Service] = {}
        self._contact_submissions: list[ContactForm] = []

        if seed:
            self._seed()

    def _seed(self):
        """Load the sample catalog. Runs once, from the constructor."""
        for data in seed_data.PACKAGES:
            self._insert(self._packages, Package, InsertPackage(**data))
        for data in seed_data.TESTIMONIALS:
            self._insert(self._testimonials, Testimonial, InsertTestimonial(**data))
        for data in seed_data.SERVICES:
            self._insert(self._services, Service, InsertService(**data))
        for data in seed_data.gallery_items():
            self._insert(self._gallery_items, GalleryItem, InsertGalleryItem(**data))

        logger.info(
            f"Seeded store with {len(self._packages)} packages, "
            f"{len(self._testimonials)} testimonials, {len(self._services)} services, "
            f"{len(self._gallery_items)} gallery items"
        )

    @staticmethod
    def _insert(
        collection: dict[str, EntityT],
        model: type[EntityT],
        fields: BaseModel,
    ) -> EntityT:
        """Assign a fresh id, store the record and return a copy of it."""
        record_id = str(uuid.uuid4())
        record = model(**fields.model_dump(exclude={"id"}), id=record_id)
        collection[record_id] = record
        return record.model_copy(deep=True)

    @staticmethod
    def _lookup(collection: dict[str, EntityT], record_id: str) -> Optional[EntityT]:
        record = collection.get(record_id)
        return record.model_copy(deep=True) if record is not None else None

    @staticmethod
    def _list(collection: dict[str, EntityT]) -> list[EntityT]:
        return [record.model_copy(deep=True) for record in collection.values()]

    # Users

    async def get_user(self, user_id: str) -> Optional[User]:
        return self._lookup(self._users, user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        """Return the earliest-created user with this exact username."""
        for user in self._users.values():
            if user.username == username:
                return user.model_copy(deep=True)
        return None

    async def get_all_users(self) -> list[User]:
        return self._list(self._users)

    async def create_user(self, user: InsertUser) -> User:
        return self._insert(self._users, User, user)

    # Packages

    async def get_all_packages(self) -> list[Package]:
        return self._list(self._packages)

    async def get_package(self, package_id: str) -> Optional[Package]:
        return self._lookup(self._packages, package_id)

    async def create_package(self, package: InsertPackage) -> Package:
        return self._insert(self._packages, Package, package)

    # Testimonials

    async def get_all_testimonials(self) -> list[Testimonial]:
        return self._list(self._testimonials)

    async def get_testimonial(self, testimonial_id: str) -> Optional[Testimonial]:
        return self._lookup(self._testimonials, testimonial_id)

    async def create_testimonial(self, testimonial: InsertTestimonial) -> Testimonial:
        return self._insert(self._testimonials, Testimonial, testimonial)

    # Gallery

    async def get_all_gallery_items(self) -> list[GalleryItem]:
        return self._list(self._gallery_items)

    async def get_gallery_item(self, item_id: str) -> Optional[GalleryItem]:
        return self._lookup(self._gallery_items, item_id)

    async def create_gallery_item(self, item: InsertGalleryItem) -> GalleryItem:
        return self._insert(self._gallery_items, GalleryItem, item)

    # Services

    async def get_all_services(self) -> list[Service]:
        return self._list(self._services)

    async def get_service(self, service_id: str) -> Optional[Service]:
        return self._lookup(self._services, service_id)

    async def create_service(self, service: InsertService) -> Service:
        return self._insert(self._services, Service, service)

    # Contact form

    async def submit_contact_form(self, form: ContactForm) -> None:
        """Append a validated submission to the log."""
        self._contact_submissions.append(form.model_copy(deep=True))
        logger.info(f"Contact form submitted: {form.model_dump()}")

    @property
    def contact_submissions(self) -> tuple[ContactForm, ...]:
        """Snapshot of the submission log, oldest first."""
        return tuple(form.model_copy(deep=True) for form in self._contact_submissions)

    def counts(self) -> dict[str, int]:
        """Collection sizes, for the health endpoint."""
        return {
            "users": len(self._users),
            "packages": len(self._packages),
            "testimonials": len(self._testimonials),
            "services": len(self._services),
            "gallery_items": len(self._gallery_items),
            "contact_submissions": len(self._contact_submissions),
        }
