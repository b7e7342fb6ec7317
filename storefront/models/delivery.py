"""Delivery destination and quote models"""

from pydantic import BaseModel
from typing import Optional


class Destination(BaseModel):
    """
    Delivery destination.

    Only a destination picked from a geocoding suggestion is confirmed;
    free-typed text never carries coordinates the quote engine will use.
    """
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    address: str = ""
    place_id: Optional[str] = None
    confirmed: bool = False

    @property
    def is_confirmed(self) -> bool:
        return self.confirmed and self.latitude is not None and self.longitude is not None


class FeeBreakdown(BaseModel):
    """How a delivery fee was derived"""
    base_delivery_fee: float
    delivery_fee_per_km: float
    distance_km: float
    raw_fee: float
    min_delivery_fee: Optional[float] = None
    max_delivery_fee: Optional[float] = None
    max_delivery_distance_km: Optional[float] = None
    rounded_fee: float

    class Config:
        frozen = True


class DeliveryQuote(BaseModel):
    """Per-merchant deliverability and fee for one destination"""
    merchant_id: str
    deliverable: bool
    distance_km: Optional[float] = None
    fee: Optional[float] = None
    reason: Optional[str] = None
    breakdown: Optional[FeeBreakdown] = None

    class Config:
        frozen = True


class QuoteRequest(BaseModel):
    """Request to quote delivery for every merchant in a cart"""
    cart_id: str
    destination: Destination


class QuoteResponse(BaseModel):
    """Per-merchant quotes in cart order"""
    quotes: list[DeliveryQuote]
    all_deliverable: bool
