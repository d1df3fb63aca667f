"""
API Routes for the Yatra site.
"""
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
import logging

from ..models import ContactForm, GalleryItem, Package, Service, Testimonial
from ..services.storage import Storage
from .dependencies import get_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["catalog"])


class ContactResponse(BaseModel):
    success: bool
    message: str


# Endpoints

@router.get("/packages", response_model=list[Package])
async def list_packages(storage: Storage = Depends(get_storage)):
    """List all tour packages."""
    try:
        return await storage.get_all_packages()
    except Exception:
        logger.exception("Failed to fetch packages")
        raise HTTPException(status_code=500, detail="Failed to fetch packages")


@router.get("/packages/{package_id}", response_model=Package)
async def get_package(package_id: str, storage: Storage = Depends(get_storage)):
    """Get a single tour package."""
    try:
        package = await storage.get_package(package_id)
    except Exception:
        logger.exception(f"Failed to fetch package {package_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch package")

    if package is None:
        raise HTTPException(status_code=404, detail="Package not found")
    return package


@router.get("/testimonials", response_model=list[Testimonial])
async def list_testimonials(storage: Storage = Depends(get_storage)):
    """List customer testimonials."""
    try:
        return await storage.get_all_testimonials()
    except Exception:
        logger.exception("Failed to fetch testimonials")
        raise HTTPException(status_code=500, detail="Failed to fetch testimonials")


@router.get("/services", response_model=list[Service])
async def list_services(storage: Storage = Depends(get_storage)):
    """List agency services."""
    try:
        return await storage.get_all_services()
    except Exception:
        logger.exception("Failed to fetch services")
        raise HTTPException(status_code=500, detail="Failed to fetch services")


@router.get("/gallery", response_model=list[GalleryItem])
async def list_gallery(storage: Storage = Depends(get_storage)):
    """List gallery photos."""
    try:
        return await storage.get_all_gallery_items()
    except Exception:
        logger.exception("Failed to fetch gallery items")
        raise HTTPException(status_code=500, detail="Failed to fetch gallery items")


@router.post("/contact", response_model=ContactResponse)
async def submit_contact(form: ContactForm, storage: Storage = Depends(get_storage)):
    """
    Submit the contact form.
    The body is validated into ContactForm before this runs; failures are
    returned as 400 by the validation handler.
    """
    try:
        await storage.submit_contact_form(form)
    except Exception:
        logger.exception("Failed to submit contact form")
        raise HTTPException(status_code=500, detail="Failed to submit contact form")

    return ContactResponse(
        success=True,
        message="Contact form submitted successfully"
    )
