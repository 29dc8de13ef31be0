# Routers package
from . import verification_router
from . import pricing_router

__all__ = [
    "verification_router",
    "pricing_router",
]
