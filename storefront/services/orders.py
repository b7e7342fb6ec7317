"""
Order Aggregator

Combines merchant subtotals and delivery quotes into one order summary,
decides whether the order can be placed, and renders the chat message
handed to the customer's messaging channel.
"""

from typing import Mapping, Optional
from urllib.parse import quote

from ..models.cart import CartLineItem
from ..models.checkout import (
    BlockerKind,
    CustomerDetails,
    MerchantSubtotal,
    OrderBlocker,
    OrderSummary,
)
from ..models.delivery import Destination, DeliveryQuote
from ..models.merchant import Merchant
from ..models.payment import PaymentMethod
from .grouping import subtotal
from .rounding import round_to_currency

UNKNOWN_MERCHANT_NAME = "Restaurant"
NOT_QUOTED = "Delivery has not been quoted"

# Same unescaped set as JavaScript's encodeURIComponent
URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_message(message: str) -> str:
    return quote(message, safe=URI_COMPONENT_SAFE)


def messenger_link(summary: OrderSummary, page_id: str, base_url: str = "https://m.me") -> str:
    """Link that opens a chat with the page, prefilled with the order message"""
    return f"{base_url.rstrip('/')}/{page_id}?text={summary.encoded_message}"


class OrderAggregator:
    """Builds immutable order summaries; holds only formatting settings"""

    def __init__(self, brand_name: str = "Row-Nel FooDelivery", currency_symbol: str = "₱"):
        self.brand_name = brand_name
        self.currency_symbol = currency_symbol

    def build(
        self,
        cart_groups: Mapping[str, list[CartLineItem]],
        quotes: Mapping[str, DeliveryQuote],
        chosen_payment: Optional[PaymentMethod],
        customer: CustomerDetails,
        destination: Optional[Destination] = None,
        merchants: Optional[Mapping[str, Merchant]] = None,
        rejected_payment: Optional[PaymentMethod] = None,
    ) -> OrderSummary:
        """
        Build the summary for one checkout attempt.

        Undeliverable merchants add nothing to the delivery fee total but
        block the whole order; there is no partial placement. A
        `rejected_payment` is a method the customer asked for that is not
        offered for this merchant mix; it is reported by name.
        """
        merchants = merchants or {}

        merchant_subtotals = []
        quote_list = []
        for merchant_id, items in cart_groups.items():
            merchant = merchants.get(merchant_id)
            merchant_subtotals.append(MerchantSubtotal(
                merchant_id=merchant_id,
                merchant_name=merchant.name if merchant else UNKNOWN_MERCHANT_NAME,
                items=list(items),
                subtotal=round_to_currency(subtotal(items)),
            ))
            quote_list.append(quotes.get(merchant_id) or DeliveryQuote(
                merchant_id=merchant_id,
                deliverable=False,
                reason=NOT_QUOTED,
            ))

        items_subtotal = round_to_currency(sum(group.subtotal for group in merchant_subtotals))
        delivery_fee_total = round_to_currency(sum(
            q.fee for q in quote_list if q.deliverable and q.fee is not None
        ))
        grand_total = round_to_currency(items_subtotal + delivery_fee_total)

        blockers = self._blockers(
            merchant_subtotals, quote_list, chosen_payment, customer, destination, rejected_payment
        )

        message = self.render_message(
            merchant_subtotals,
            items_subtotal=items_subtotal,
            delivery_fee_total=delivery_fee_total,
            grand_total=grand_total,
            customer=customer,
            destination=destination,
            payment=chosen_payment,
        )

        return OrderSummary(
            merchant_subtotals=merchant_subtotals,
            quotes=quote_list,
            items_subtotal=items_subtotal,
            delivery_fee_total=delivery_fee_total,
            grand_total=grand_total,
            customer=customer,
            destination=destination,
            payment_method=chosen_payment,
            notes=customer.merged_notes,
            can_place_order=not blockers,
            blockers=blockers,
            message=message,
            encoded_message=encode_message(message),
        )

    def _blockers(
        self,
        merchant_subtotals: list[MerchantSubtotal],
        quotes: list[DeliveryQuote],
        payment: Optional[PaymentMethod],
        customer: CustomerDetails,
        destination: Optional[Destination],
        rejected_payment: Optional[PaymentMethod] = None,
    ) -> list[OrderBlocker]:
        blockers = []

        if not merchant_subtotals:
            blockers.append(OrderBlocker(kind=BlockerKind.EMPTY_CART, detail="Your cart is empty"))

        required = [
            (customer.name, "Full name is required"),
            (customer.contact_number, "Contact number is required"),
            (destination.address if destination else "", "Delivery address is required"),
        ]
        for value, detail in required:
            if not value or not value.strip():
                blockers.append(OrderBlocker(kind=BlockerKind.MISSING_FIELD, detail=detail))
        if payment is None and rejected_payment is not None:
            blockers.append(OrderBlocker(
                kind=BlockerKind.PAYMENT_UNAVAILABLE,
                detail=f"{rejected_payment.name} is not available for this merchant mix",
            ))
        elif payment is None:
            blockers.append(OrderBlocker(kind=BlockerKind.MISSING_FIELD, detail="Payment method is required"))

        if destination is None or not destination.is_confirmed:
            blockers.append(OrderBlocker(
                kind=BlockerKind.DESTINATION_UNCONFIRMED,
                detail="Select a suggested address to confirm the delivery location",
            ))

        names = {group.merchant_id: group.merchant_name for group in merchant_subtotals}
        for q in quotes:
            if not q.deliverable:
                blockers.append(OrderBlocker(
                    kind=BlockerKind.UNDELIVERABLE_MERCHANT,
                    detail=f"{names.get(q.merchant_id, UNKNOWN_MERCHANT_NAME)}: {q.reason}",
                    merchant_id=q.merchant_id,
                ))

        return blockers

    def money(self, amount: float) -> str:
        return f"{self.currency_symbol}{amount:.2f}"

    def render_message(
        self,
        merchant_subtotals: list[MerchantSubtotal],
        items_subtotal: float,
        delivery_fee_total: float,
        grand_total: float,
        customer: CustomerDetails,
        destination: Optional[Destination],
        payment: Optional[PaymentMethod],
    ) -> str:
        """Render the order as chat text. Labels and their order are fixed."""
        lines = [
            f"🛒 {self.brand_name} ORDER",
            "",
            f"👤 Customer: {customer.name}",
            f"📞 Contact: {customer.contact_number}",
            "📍 Service: Delivery",
            "",
            "📋 ORDER DETAILS:",
        ]

        for group in merchant_subtotals:
            lines.append("")
            lines.append(f"🏪 {group.merchant_name}:")
            for item in group.items:
                lines.append(f"  • {self._item_label(item)} x{item.quantity} - {self.money(item.line_total)}")
            lines.append(f"  Subtotal: {self.money(group.subtotal)}")

        lines += [
            "",
            f"🧾 Items Subtotal: {self.money(items_subtotal)}",
            f"🚚 Delivery Fee: {self.money(delivery_fee_total)}",
            f"🏠 Address: {destination.address if destination else ''}",
        ]
        if customer.landmark:
            lines.append(f"🗺️ Landmark: {customer.landmark}")
        lines += [
            f"💰 TOTAL: {self.money(grand_total)}",
            f"💳 Payment: {payment.name if payment else 'Not selected'}",
        ]
        if customer.notes:
            lines.append(f"📝 Notes: {customer.notes}")

        lines += [
            "",
            f"Please confirm this order to proceed. Thank you for choosing {self.brand_name}!",
        ]
        return "\n".join(lines)

    @staticmethod
    def _item_label(item: CartLineItem) -> str:
        if item.customizations:
            return f"{item.name} ({', '.join(item.customizations)})"
        return item.name
