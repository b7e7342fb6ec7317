# Pricing and checkout services

from .geo import distance_km, EARTH_RADIUS_KM
from .fees import quote_fee
from .rounding import round_to_currency, round_half_up
from .grouping import group_by_merchant, merchant_ids, subtotal
from .delivery import DeliveryQuoteEngine, DEFAULT_DELIVERY_FEE_PER_KM
from .payments import PaymentScopeResolver
from .orders import OrderAggregator, encode_message, messenger_link
from .checkout import CheckoutPipeline

__all__ = [
    "distance_km",
    "EARTH_RADIUS_KM",
    "quote_fee",
    "round_to_currency",
    "round_half_up",
    "group_by_merchant",
    "merchant_ids",
    "subtotal",
    "DeliveryQuoteEngine",
    "DEFAULT_DELIVERY_FEE_PER_KM",
    "PaymentScopeResolver",
    "OrderAggregator",
    "encode_message",
    "messenger_link",
    "CheckoutPipeline",
]
