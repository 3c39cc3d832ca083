"""Image Service - gallery images stored on the local filesystem"""

import logging
import shutil
from pathlib import Path
from typing import BinaryIO, List

from domain.models import Image

logger = logging.getLogger("lenslocked.images")


class ImageService:
    """Stores images under ``{root}/galleries/{gallery_id}/{filename}``."""

    def __init__(self, root: str = "images"):
        self.root = Path(root)

    def _gallery_dir(self, gallery_id: int) -> Path:
        return self.root / "galleries" / str(gallery_id)

    def _file_path(self, gallery_id: int, filename: str) -> Path:
        # Refuse names that would escape the gallery directory
        name = Path(filename).name
        if name in ("", ".", "..") or name != filename:
            raise ValueError(f"invalid image filename: {filename!r}")
        return self._gallery_dir(gallery_id) / name

    def create(self, gallery_id: int, stream: BinaryIO, filename: str) -> Image:
        """Copy ``stream`` into the gallery directory. The stream is closed.

        A copy that fails partway leaves no file behind.
        """
        try:
            dst = self._file_path(gallery_id, filename)
            dst.parent.mkdir(parents=True, exist_ok=True)
            try:
                with open(dst, "wb") as out:
                    shutil.copyfileobj(stream, out)
            except Exception:
                dst.unlink(missing_ok=True)
                logger.warning(
                    "image_create_failed gallery_id=%s filename=%s",
                    gallery_id,
                    filename,
                )
                raise
        finally:
            stream.close()
        logger.info("image_created gallery_id=%s filename=%s", gallery_id, filename)
        return Image(gallery_id=gallery_id, filename=filename)

    def by_gallery_id(self, gallery_id: int) -> List[Image]:
        directory = self._gallery_dir(gallery_id)
        if not directory.is_dir():
            return []
        return [
            Image(gallery_id=gallery_id, filename=p.name)
            for p in sorted(directory.iterdir())
            if p.is_file()
        ]

    def delete(self, image: Image) -> None:
        self._file_path(image.gallery_id, image.filename).unlink()
        logger.info(
            "image_deleted gallery_id=%s filename=%s", image.gallery_id, image.filename
        )
