# Services package (re-export for stable imports)
from .verification_service import VerificationService, CheckOutcome
from .pricing_service import PricingService

__all__ = [
    "VerificationService",
    "CheckOutcome",
    "PricingService",
]
