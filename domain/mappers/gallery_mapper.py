"""
Gallery domain mappers.
"""

from domain.models import Gallery, Image
from domain.schemas.gallery_schemas import GalleryResponse, ImageResponse


class GalleryMapper:
    """Mapper for gallery-related transformations."""

    @staticmethod
    def image_to_response(image: Image) -> ImageResponse:
        return ImageResponse(
            gallery_id=image.gallery_id, filename=image.filename, path=image.path()
        )

    @staticmethod
    def to_response(gallery: Gallery) -> GalleryResponse:
        """Convert a Gallery, with its request-scoped images, to a DTO."""
        return GalleryResponse(
            id=gallery.id,
            title=gallery.title,
            user_id=gallery.user_id,
            images=[GalleryMapper.image_to_response(i) for i in gallery.images],
            created_at=gallery.created_at,
            updated_at=gallery.updated_at,
        )
