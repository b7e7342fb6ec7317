# Storefront Models

from .merchant import Merchant, MenuItem, Variation, VariationGroup, AddOn
from .cart import Cart, CartLineItem, AddToCartRequest, UpdateCartItemRequest, CartResponse
from .delivery import Destination, DeliveryQuote, FeeBreakdown, QuoteRequest, QuoteResponse
from .payment import PaymentMethod, PaymentScope
from .checkout import (
    BlockerKind,
    CheckoutRequest,
    CheckoutResponse,
    CustomerDetails,
    MerchantSubtotal,
    OrderBlocker,
    OrderSummary,
)

__all__ = [
    "Merchant",
    "MenuItem",
    "Variation",
    "VariationGroup",
    "AddOn",
    "Cart",
    "CartLineItem",
    "AddToCartRequest",
    "UpdateCartItemRequest",
    "CartResponse",
    "Destination",
    "DeliveryQuote",
    "FeeBreakdown",
    "QuoteRequest",
    "QuoteResponse",
    "PaymentMethod",
    "PaymentScope",
    "BlockerKind",
    "CheckoutRequest",
    "CheckoutResponse",
    "CustomerDetails",
    "MerchantSubtotal",
    "OrderBlocker",
    "OrderSummary",
]
