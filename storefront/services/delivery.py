"""
Delivery Quote Engine

Decides, per merchant, whether a destination can be served and at what fee.
Every merchant is quoted on its own so a cart can be partly deliverable.
"""

import logging
from typing import Mapping, Optional

from ..models.delivery import Destination, DeliveryQuote, FeeBreakdown
from ..models.merchant import Merchant
from ..models.cart import CartLineItem
from .fees import quote_fee, raw_fee
from .geo import distance_km
from .rounding import round_to_currency

logger = logging.getLogger(__name__)

DEFAULT_DELIVERY_FEE_PER_KM = 4.0

MERCHANT_NOT_FOUND = "Merchant not found"
DESTINATION_NOT_CONFIRMED = "Please select a suggested address so we can calculate delivery"
MERCHANT_LOCATION_MISSING = "Merchant delivery location not configured"


def format_km(value: float) -> str:
    return f"{value:g}"


class DeliveryQuoteEngine:
    """Quotes delivery against a read-only merchant catalog snapshot"""

    def __init__(
        self,
        merchants: Mapping[str, Merchant],
        default_per_km_rate: float = DEFAULT_DELIVERY_FEE_PER_KM,
    ):
        """
        Args:
            merchants: Merchant snapshot keyed by merchant id
            default_per_km_rate: Rate used when a merchant has none configured
        """
        self.merchants = merchants
        self.default_per_km_rate = default_per_km_rate

    def quote(
        self,
        merchant: Optional[Merchant],
        destination: Optional[Destination],
        merchant_id: Optional[str] = None,
    ) -> DeliveryQuote:
        """
        Quote one merchant. The first failing check decides the reason:
        unknown merchant, unconfirmed destination, merchant without a
        location, then distance beyond the merchant's radius.
        """
        if merchant is None:
            logger.info(f"Quote for unknown merchant {merchant_id}")
            return DeliveryQuote(
                merchant_id=merchant_id or "",
                deliverable=False,
                reason=MERCHANT_NOT_FOUND,
            )

        if destination is None or not destination.is_confirmed:
            return DeliveryQuote(
                merchant_id=merchant.id,
                deliverable=False,
                reason=DESTINATION_NOT_CONFIRMED,
            )

        if not merchant.has_location:
            logger.info(f"Merchant {merchant.id} has no delivery location")
            return DeliveryQuote(
                merchant_id=merchant.id,
                deliverable=False,
                reason=MERCHANT_LOCATION_MISSING,
            )

        distance = distance_km(
            merchant.latitude,
            merchant.longitude,
            destination.latitude,
            destination.longitude,
        )

        radius = merchant.max_delivery_distance_km
        if radius is not None and distance > radius:
            logger.info(f"Merchant {merchant.id} out of range: {distance} km > {radius} km")
            return DeliveryQuote(
                merchant_id=merchant.id,
                deliverable=False,
                distance_km=distance,
                reason=f"Outside delivery area ({distance:.2f} km away, {format_km(radius)} km max)",
            )

        breakdown = self._fee_breakdown(merchant, distance)
        return DeliveryQuote(
            merchant_id=merchant.id,
            deliverable=True,
            distance_km=distance,
            fee=breakdown.rounded_fee,
            breakdown=breakdown,
        )

    def quote_all(
        self,
        merchant_groups: Mapping[str, list[CartLineItem]],
        destination: Optional[Destination],
    ) -> dict[str, DeliveryQuote]:
        """Quote every merchant group independently, in group order"""
        return {
            merchant_id: self.quote(self.merchants.get(merchant_id), destination, merchant_id=merchant_id)
            for merchant_id in merchant_groups
        }

    def _fee_breakdown(self, merchant: Merchant, distance: float) -> FeeBreakdown:
        """Resolve the merchant's pricing config and evaluate the fee curve"""
        base_fee = merchant.base_delivery_fee
        if base_fee is None:
            base_fee = merchant.delivery_fee or 0.0

        per_km_rate = merchant.delivery_fee_per_km
        if per_km_rate is None:
            per_km_rate = self.default_per_km_rate

        min_fee = merchant.min_delivery_fee
        max_fee = merchant.max_delivery_fee
        if min_fee is not None and max_fee is not None and max_fee < min_fee:
            logger.warning(
                f"Merchant {merchant.id} max delivery fee {max_fee} is below "
                f"min delivery fee {min_fee}; max applies"
            )

        return FeeBreakdown(
            base_delivery_fee=base_fee,
            delivery_fee_per_km=per_km_rate,
            distance_km=distance,
            raw_fee=round_to_currency(raw_fee(distance, base_fee, per_km_rate)),
            min_delivery_fee=min_fee,
            max_delivery_fee=max_fee,
            max_delivery_distance_km=merchant.max_delivery_distance_km,
            rounded_fee=quote_fee(distance, base_fee, per_km_rate, min_fee, max_fee),
        )
