import logging
from dataclasses import dataclass

from pydantic import ValidationError

from ...exceptions import PricingUpdateError
from ...schemas.pricing.pricing import ProductPricing
from ..ports.pricing_source import PricingFixture, PricingSource
from ..ports.pricing_store import PricingStore

logger = logging.getLogger(__name__)


@dataclass
class PricingService:
    source: PricingSource
    store: PricingStore

    def refresh(self) -> str:
        """Fetch the current prices and overwrite the snapshot; returns the written path"""
        try:
            prices = self.source.fetch_current_prices()
            self._validate(prices)
            path = self.store.save(prices)
        except Exception as e:
            logger.error(f"Error updating prices: {e}")
            raise PricingUpdateError(str(e)) from e
        logger.info(f"Prices updated: {len(prices)} products written to {path}")
        return path

    @staticmethod
    def _validate(prices: PricingFixture) -> None:
        # a malformed feed must not replace a good snapshot
        if not isinstance(prices, dict) or not prices:
            raise ValueError("Pricing source returned no products")
        for product, entry in prices.items():
            try:
                ProductPricing.model_validate(entry)
            except ValidationError as e:
                raise ValueError(f"Invalid pricing for {product}: {e.errors()[0]['msg']}") from e
