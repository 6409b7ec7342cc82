from pydantic import Field
from .base import CamelModel


class ArchiveFetchRequest(CamelModel):
    api_key: str = Field(default="", description="NASA API key")
    target_id: str = Field(default="", example="KIC 1234567", description="Target identifier")


class ArchiveFetchResponse(CamelModel):
    target_id: str
    status: str = Field(..., example="simulated")
    message: str
    elapsed_seconds: float
