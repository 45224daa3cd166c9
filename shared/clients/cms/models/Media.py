from pydantic import BaseModel


class MediaSize(BaseModel):
    file: str = ""
    width: int = 0
    height: int = 0
    mime_type: str = ""
    source_url: str = ""


class FeaturedMedia(BaseModel):
    """
    A media item (usually an image) referenced as featured media.
    """
    id: int = 0
    title: str = ""
    caption: str = ""
    alt_text: str = ""
    media_type: str = "image"
    mime_type: str = "image/jpeg"
    source_url: str = ""
    width: int = 0
    height: int = 0
    file: str = ""
    sizes: dict[str, MediaSize] = {}
