from pydantic import BaseModel


class ErrorResponse(BaseModel):
    success: bool = False
    message: str = ""


class HealthResponse(BaseModel):
    status: str = "ok"
