"""Options pages exposed by the backend's extension endpoint."""

from typing import Any

from pydantic import BaseModel, field_validator


class OptionsPageInfo(BaseModel):
    slug: str
    page_title: str = ""
    menu_title: str = ""
    description: str = ""
    icon_url: str = ""
    parent_slug: str = ""
    post_id: str | int = ""

    @field_validator("page_title", "menu_title", "description", "icon_url", "parent_slug", mode="before")
    @classmethod
    def _falsy_to_empty(cls, value: Any) -> Any:
        # the backend reports unset settings as false or null
        return value if value else ""


class OptionsPageData(OptionsPageInfo):
    acf: dict[str, Any] = {}

    @field_validator("acf", mode="before")
    @classmethod
    def _acf_to_dict(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else {}
