from pydantic import BaseModel


class ContentTypeDescriptor(BaseModel):
    """
    A custom content type discovered on the backend.

    Attributes:
        name (str): Backend machine key, e.g. "actualite-veille".
        singular_query_name (str): Field name of the single-item query, e.g. "guide".
        plural_query_name (str): Field name of the collection query, e.g. "guides".
    """
    name: str
    label: str = ""
    description: str = ""
    singular_query_name: str = ""
    plural_query_name: str = ""
    has_archive: bool = False
