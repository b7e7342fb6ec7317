"""Payment method catalog"""

from ..models.payment import PaymentMethod

PAYMENT_METHODS: list[PaymentMethod] = [
    PaymentMethod(id="cod", name="Cash on Delivery", sort_order=1),
    PaymentMethod(
        id="gcash",
        name="GCash",
        account_number="0917 555 0101",
        account_name="Row-Nel FooDelivery",
        sort_order=2,
    ),
    PaymentMethod(
        id="bank-merchant-001",
        name="BPI Bank Transfer",
        merchant_id="merchant-001",
        account_number="1234-5678-90",
        account_name="Lola's Kitchen",
        sort_order=3,
    ),
    PaymentMethod(
        id="maya-merchant-002",
        name="Maya",
        merchant_id="merchant-002",
        account_number="0918 555 0202",
        account_name="Dumpling House",
        sort_order=4,
    ),
    PaymentMethod(id="paypal", name="PayPal", active=False, sort_order=5),
]


class PaymentMethodDatabase:
    """In-memory payment method catalog"""

    def __init__(self):
        self.methods = list(PAYMENT_METHODS)

    def list_active(self) -> list[PaymentMethod]:
        """Active methods in display order"""
        return sorted((m for m in self.methods if m.active), key=lambda m: m.sort_order)


# Singleton instance
payment_method_db = PaymentMethodDatabase()
