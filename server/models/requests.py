from pydantic import BaseModel, ConfigDict, Field


class RevalidateRequest(BaseModel):
    """Change notification sent by the backend's webhook."""

    model_config = ConfigDict(populate_by_name=True)

    content_type: str = Field(alias="contentType")
    content_id: str | int | None = Field(default=None, alias="contentId")
