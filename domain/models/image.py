"""
Image value object. Images live on disk, not in the database.
"""

from dataclasses import dataclass
from urllib.parse import quote


@dataclass(frozen=True)
class Image:
    gallery_id: int
    filename: str

    def relative_path(self) -> str:
        return f"images/galleries/{self.gallery_id}/{self.filename}"

    def path(self) -> str:
        """URL path under which the image is served."""
        return quote("/" + self.relative_path())
