# verification_gateway/schemas/common.py
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
