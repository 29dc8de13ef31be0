from typing import Any, Dict, Protocol


PricingFixture = Dict[str, Dict[str, Dict[str, Any]]]


class PricingSource(Protocol):
    def fetch_current_prices(self) -> PricingFixture:
        ...
