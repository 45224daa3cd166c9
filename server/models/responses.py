from pydantic import BaseModel


class RevalidateResponse(BaseModel):
    revalidated: bool
    message: str
    timestamp: str


class ErrorResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    version: str
    cms_engine: str
    cms_configured: bool
