"""Checkout and order summary models"""

from pydantic import BaseModel
from typing import Optional
from enum import Enum

from .cart import CartLineItem
from .delivery import Destination, DeliveryQuote
from .payment import PaymentMethod


class CustomerDetails(BaseModel):
    """Customer-entered checkout fields"""
    name: str = ""
    contact_number: str = ""
    landmark: str = ""
    notes: str = ""

    @property
    def merged_notes(self) -> str:
        """Notes with the landmark appended, as stored on the order"""
        if not self.landmark:
            return self.notes
        prefix = f"{self.notes} | " if self.notes else ""
        return f"{prefix}Landmark: {self.landmark}"


class BlockerKind(str, Enum):
    EMPTY_CART = "empty_cart"
    MISSING_FIELD = "missing_field"
    DESTINATION_UNCONFIRMED = "destination_unconfirmed"
    UNDELIVERABLE_MERCHANT = "undeliverable_merchant"
    PAYMENT_UNAVAILABLE = "payment_unavailable"


class OrderBlocker(BaseModel):
    """Why an order cannot be placed yet"""
    kind: BlockerKind
    detail: str
    merchant_id: Optional[str] = None

    class Config:
        frozen = True


class MerchantSubtotal(BaseModel):
    """Items and subtotal for one merchant in the cart"""
    merchant_id: str
    merchant_name: str
    items: list[CartLineItem]
    subtotal: float

    class Config:
        frozen = True


class OrderSummary(BaseModel):
    """Combined pricing and hand-off message for one checkout attempt"""
    merchant_subtotals: list[MerchantSubtotal]
    quotes: list[DeliveryQuote]
    items_subtotal: float
    delivery_fee_total: float
    grand_total: float
    customer: CustomerDetails
    destination: Optional[Destination] = None
    payment_method: Optional[PaymentMethod] = None
    notes: str = ""
    can_place_order: bool
    blockers: list[OrderBlocker] = []
    message: str
    encoded_message: str

    class Config:
        frozen = True

    @property
    def merchant_ids(self) -> list[str]:
        return [group.merchant_id for group in self.merchant_subtotals]


class CheckoutRequest(BaseModel):
    """Request to check out a cart"""
    cart_id: str
    destination: Optional[Destination] = None
    customer: CustomerDetails
    payment_method_id: Optional[str] = None


class CheckoutResponse(BaseModel):
    """Response from checkout"""
    success: bool
    summary: Optional[OrderSummary] = None
    messenger_url: Optional[str] = None
    blockers: list[OrderBlocker] = []
    error_message: Optional[str] = None
