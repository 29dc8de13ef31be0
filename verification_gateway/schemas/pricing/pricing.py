# verification_gateway/schemas/pricing/pricing.py
from typing import Dict, Optional

from pydantic import BaseModel


class ProductPricing(BaseModel):
    base: Dict[str, float]
    factor: Dict[str, float]


class UpdatePricesResponse(BaseModel):
    ok: bool
    message: Optional[str] = None
    error: Optional[str] = None
