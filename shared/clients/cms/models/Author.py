from pydantic import BaseModel


class EmbeddedAuthor(BaseModel):
    """
    The short author record embedded into posts and content nodes.
    """
    id: int = 0
    name: str = ""
    slug: str = ""
    avatar_urls: dict[str, str] = {}


class Author(EmbeddedAuthor):
    """
    A backend user with a public author profile.
    """
    url: str = ""
    description: str = ""
    link: str = ""
