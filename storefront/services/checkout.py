"""
Checkout Pipeline

Runs the pricing core end to end over caller-supplied snapshots:
grouping, per-merchant quoting, payment scoping, then aggregation.
Nothing is cached; every call recomputes from its inputs.
"""

import logging
from typing import Iterable, Mapping, Optional

from ..models.cart import CartLineItem
from ..models.checkout import CustomerDetails, OrderSummary
from ..models.delivery import Destination, DeliveryQuote
from ..models.merchant import Merchant
from ..models.payment import PaymentMethod
from .delivery import DeliveryQuoteEngine, DEFAULT_DELIVERY_FEE_PER_KM
from .grouping import group_by_merchant, merchant_ids
from .orders import OrderAggregator
from .payments import PaymentScopeResolver

logger = logging.getLogger(__name__)


class CheckoutPipeline:
    """Stateless composition of the pricing components"""

    def __init__(
        self,
        aggregator: Optional[OrderAggregator] = None,
        resolver: Optional[PaymentScopeResolver] = None,
        default_per_km_rate: float = DEFAULT_DELIVERY_FEE_PER_KM,
    ):
        self.aggregator = aggregator or OrderAggregator()
        self.resolver = resolver or PaymentScopeResolver()
        self.default_per_km_rate = default_per_km_rate

    def quote(
        self,
        items: Iterable[CartLineItem],
        merchants: Mapping[str, Merchant],
        destination: Optional[Destination],
    ) -> dict[str, DeliveryQuote]:
        """Per-merchant quotes for the cart, in first-seen merchant order"""
        engine = DeliveryQuoteEngine(merchants, default_per_km_rate=self.default_per_km_rate)
        return engine.quote_all(group_by_merchant(items), destination)

    def payment_options(
        self,
        items: Iterable[CartLineItem],
        payment_catalog: Iterable[PaymentMethod],
    ) -> list[PaymentMethod]:
        return self.resolver.resolve(payment_catalog, merchant_ids(items))

    def run(
        self,
        items: Iterable[CartLineItem],
        merchants: Mapping[str, Merchant],
        payment_catalog: Iterable[PaymentMethod],
        destination: Optional[Destination],
        customer: CustomerDetails,
        payment_method_id: Optional[str] = None,
    ) -> OrderSummary:
        """
        Price the cart and build its order summary.

        A requested payment method outside the cart's payment scope is
        not chosen; it blocks placement and is named in the blocker.
        """
        items = list(items)
        payment_catalog = list(payment_catalog)
        groups = group_by_merchant(items)
        engine = DeliveryQuoteEngine(merchants, default_per_km_rate=self.default_per_km_rate)
        quotes = engine.quote_all(groups, destination)

        chosen_payment = None
        rejected_payment = None
        if payment_method_id:
            chosen_payment = self.resolver.find(payment_catalog, set(groups), payment_method_id)
            if chosen_payment is None:
                logger.info(f"Payment method {payment_method_id} not offerable for merchants {list(groups)}")
                rejected_payment = next((m for m in payment_catalog if m.id == payment_method_id), None)

        return self.aggregator.build(
            groups,
            quotes,
            chosen_payment,
            customer,
            destination=destination,
            merchants=merchants,
            rejected_payment=rejected_payment,
        )
