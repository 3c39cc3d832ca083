"""Gallery and gallery image routes"""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
import logging
from typing import List

from api.dependencies import get_services, require_user
from app.config import settings
from app.exceptions import ERROR_PREFIX, NotFoundError
from domain.mappers import GalleryMapper
from domain.models import Gallery, Image, User
from domain.schemas.gallery_schemas import GalleryForm, GalleryResponse
from services.container import Services

router = APIRouter(prefix="/galleries", tags=["Galleries"])
logger = logging.getLogger("lenslocked.api.galleries")


def gallery_by_id(gallery_id: int, services: Services) -> Gallery:
    """Load a gallery and attach its images"""
    gallery = services.gallery.by_id(gallery_id)
    gallery.images = services.image.by_gallery_id(gallery.id)
    return gallery


def owned_gallery(gallery_id: int, user: User, services: Services) -> Gallery:
    """Load a gallery the current user owns; other users' galleries look missing"""
    gallery = gallery_by_id(gallery_id, services)
    if gallery.user_id != user.id:
        raise NotFoundError(ERROR_PREFIX + "Gallery not found")
    return gallery


@router.get("", response_model=List[GalleryResponse])
def index(user: User = Depends(require_user), services: Services = Depends(get_services)):
    """List the current user's galleries"""
    galleries = services.gallery.by_user_id(user.id)
    return [GalleryMapper.to_response(g) for g in galleries]


@router.post("", response_model=GalleryResponse, status_code=status.HTTP_201_CREATED)
def create(
    form: GalleryForm,
    user: User = Depends(require_user),
    services: Services = Depends(get_services),
):
    """Create a gallery owned by the current user"""
    gallery = services.gallery.create(Gallery(title=form.title, user_id=user.id))
    return GalleryMapper.to_response(gallery)


@router.get("/{gallery_id}", response_model=GalleryResponse)
def show(gallery_id: int, services: Services = Depends(get_services)):
    """Show any gallery with its images"""
    return GalleryMapper.to_response(gallery_by_id(gallery_id, services))


@router.post("/{gallery_id}/update", response_model=GalleryResponse)
def update(
    gallery_id: int,
    form: GalleryForm,
    user: User = Depends(require_user),
    services: Services = Depends(get_services),
):
    gallery = owned_gallery(gallery_id, user, services)
    gallery.title = form.title
    services.gallery.update(gallery)
    return GalleryMapper.to_response(gallery)


@router.post("/{gallery_id}/delete")
def delete(
    gallery_id: int,
    user: User = Depends(require_user),
    services: Services = Depends(get_services),
):
    """Delete a gallery. Its image files are left on disk."""
    gallery = owned_gallery(gallery_id, user, services)
    services.gallery.delete(gallery)
    return {"status": "ok", "deleted": gallery_id}


@router.post("/{gallery_id}/images", response_model=GalleryResponse)
def upload_images(
    gallery_id: int,
    images: List[UploadFile] = File(...),
    user: User = Depends(require_user),
    services: Services = Depends(get_services),
):
    """Store uploaded images in the gallery. Nothing is stored if any file is too large."""
    gallery = owned_gallery(gallery_id, user, services)
    for upload in images:
        if upload.size is not None and upload.size > settings.max_upload_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"{upload.filename} is too large",
            )

    for upload in images:
        filename = (upload.filename or "").replace(" ", "")
        try:
            services.image.create(gallery.id, upload.file, filename)
        except ValueError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid filename {upload.filename!r}",
            )

    gallery.images = services.image.by_gallery_id(gallery.id)
    return GalleryMapper.to_response(gallery)


@router.post("/{gallery_id}/images/{filename}/delete", response_model=GalleryResponse)
def delete_image(
    gallery_id: int,
    filename: str,
    user: User = Depends(require_user),
    services: Services = Depends(get_services),
):
    """Remove one image file from the gallery"""
    gallery = owned_gallery(gallery_id, user, services)
    try:
        services.image.delete(Image(gallery_id=gallery.id, filename=filename))
    except (FileNotFoundError, ValueError):
        raise NotFoundError(ERROR_PREFIX + "Image not found")

    gallery.images = services.image.by_gallery_id(gallery.id)
    return GalleryMapper.to_response(gallery)
