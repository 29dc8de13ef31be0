import copy

from ...application.ports.pricing_source import PricingFixture, PricingSource


# Installation prices in USD. base: size -> amount, factor: home age tier -> surcharge.
STATIC_PRICES: PricingFixture = {
    "panel-100": {
        "base": {"small": 1200, "medium": 1450, "large": 1700},
        "factor": {"0-10": 0, "11-25": 150, "26-50": 300, "50+": 500},
    },
    "panel-200": {
        "base": {"small": 1800, "medium": 2150, "large": 2500},
        "factor": {"0-10": 0, "11-25": 200, "26-50": 400, "50+": 650},
    },
    "ev-charger": {
        "base": {"small": 650, "medium": 900, "large": 1250},
        "factor": {"0-10": 0, "11-25": 100, "26-50": 225, "50+": 375},
    },
    "smart-home": {
        "base": {"small": 400, "medium": 750, "large": 1100},
        "factor": {"0-10": 0, "11-25": 75, "26-50": 150, "50+": 250},
    },
}


class StaticPricingSource(PricingSource):
    """Stands in for a remote price feed until one is integrated"""

    def fetch_current_prices(self) -> PricingFixture:
        return copy.deepcopy(STATIC_PRICES)
