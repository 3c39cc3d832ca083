from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime


class GalleryForm(BaseModel):
    title: str = ""


class ImageResponse(BaseModel):
    gallery_id: int
    filename: str
    path: str


class GalleryResponse(BaseModel):
    id: int
    title: str
    user_id: int
    images: List[ImageResponse] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
