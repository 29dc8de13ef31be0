# verification_gateway/schemas/verification/verification.py
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class VerificationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"


class SendCodeRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    phone: Optional[str] = None


class CheckCodeRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    phone: Optional[str] = None
    code: Optional[str] = None


class SendCodeResponse(BaseModel):
    success: bool = True
    status: str


class CheckCodeResponse(BaseModel):
    success: bool
    error: Optional[str] = None
