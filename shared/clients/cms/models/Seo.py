"""SEO metadata attached to posts, pages and generic content nodes."""

from pydantic import BaseModel


class SeoImage(BaseModel):
    """
    Image descriptor used by Open Graph and Twitter cards.
    """
    url: str = ""
    width: int = 0
    height: int = 0
    alt_text: str = ""


class SeoMetadata(BaseModel):
    """
    SEO metadata of a single entity, as exposed by the backend's SEO plugin.
    """
    title: str = ""
    description: str = ""
    canonical: str = ""
    opengraph_title: str = ""
    opengraph_description: str = ""
    opengraph_url: str = ""
    opengraph_image: SeoImage | None = None
    twitter_title: str = ""
    twitter_description: str = ""
    twitter_image: SeoImage | None = None
