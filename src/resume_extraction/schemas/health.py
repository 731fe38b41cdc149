from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    completion_configured: bool
    model: str
    version: str


class StatusResponse(BaseModel):
    status: str
