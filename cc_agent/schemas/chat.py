from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"

class ChatResponse(BaseModel):
    prompt: str
    response: str

class ErrorResponse(BaseModel):
    error: str
