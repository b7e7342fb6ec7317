"""Payment method scoping for multi-merchant carts"""

from typing import Iterable, Optional

from ..models.payment import PaymentMethod, PaymentScope


class PaymentScopeResolver:
    """
    Filters a payment catalog down to the methods a cart may offer.

    Global methods are always offered. A merchant-bound method is offered
    only when its merchant is the sole merchant in the cart. The active
    flag is not consulted; the catalog filters inactive methods upstream.
    """

    def resolve(
        self,
        catalog: Iterable[PaymentMethod],
        merchant_ids_in_cart: set[str],
    ) -> list[PaymentMethod]:
        sole_merchant = next(iter(merchant_ids_in_cart)) if len(merchant_ids_in_cart) == 1 else None
        return [
            method for method in catalog
            if method.scope == PaymentScope.GLOBAL
            or (sole_merchant is not None and method.merchant_id == sole_merchant)
        ]

    def find(
        self,
        catalog: Iterable[PaymentMethod],
        merchant_ids_in_cart: set[str],
        payment_method_id: str,
    ) -> Optional[PaymentMethod]:
        """Look up a method by id among those offerable for the cart"""
        return next(
            (m for m in self.resolve(catalog, merchant_ids_in_cart) if m.id == payment_method_id),
            None,
        )
