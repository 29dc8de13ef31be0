from typing import Protocol

from .pricing_source import PricingFixture


class PricingStore(Protocol):
    def save(self, prices: PricingFixture) -> str:
        ...
