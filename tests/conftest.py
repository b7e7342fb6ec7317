"""Shared fixtures for storefront tests"""

import math

import pytest

from storefront.models import (
    CartLineItem,
    CustomerDetails,
    Destination,
    Merchant,
    PaymentMethod,
)
from storefront.services.geo import EARTH_RADIUS_KM

MANILA = (14.5995, 120.9842)


def north_of(lat: float, lon: float, km: float) -> tuple[float, float]:
    """Point `km` due north along the meridian"""
    return lat + math.degrees(km / EARTH_RADIUS_KM), lon


@pytest.fixture
def destination_at():
    """Build a confirmed destination `km` north of Manila"""
    def _build(km: float, address: str = "123 Mabini St, Manila") -> Destination:
        lat, lon = north_of(*MANILA, km)
        return Destination(latitude=lat, longitude=lon, address=address, place_id="osm-123", confirmed=True)
    return _build


@pytest.fixture
def m1() -> Merchant:
    return Merchant(
        id="M1",
        name="Lola's Kitchen",
        latitude=MANILA[0],
        longitude=MANILA[1],
        base_delivery_fee=20.0,
        delivery_fee_per_km=4.0,
        max_delivery_distance_km=5.0,
    )


@pytest.fixture
def m2() -> Merchant:
    return Merchant(
        id="M2",
        name="Dumpling House",
        latitude=MANILA[0],
        longitude=MANILA[1],
        base_delivery_fee=30.0,
        delivery_fee_per_km=5.0,
        max_delivery_distance_km=1.0,
    )


@pytest.fixture
def make_item():
    def _build(item_id: str, merchant_id: str, unit_price: float, quantity: int = 1, **kwargs) -> CartLineItem:
        return CartLineItem(
            id=item_id,
            merchant_id=merchant_id,
            menu_item_id=kwargs.pop("menu_item_id", item_id),
            name=kwargs.pop("name", f"Item {item_id}"),
            unit_price=unit_price,
            quantity=quantity,
            **kwargs,
        )
    return _build


@pytest.fixture
def customer() -> CustomerDetails:
    return CustomerDetails(name="Juan Dela Cruz", contact_number="0917 123 4567")


@pytest.fixture
def payment_catalog() -> list[PaymentMethod]:
    return [
        PaymentMethod(id="cod", name="Cash on Delivery"),
        PaymentMethod(id="bank-m1", name="BPI Bank Transfer", merchant_id="M1"),
        PaymentMethod(id="maya-m2", name="Maya", merchant_id="M2"),
        PaymentMethod(id="gcash", name="GCash"),
        PaymentMethod(id="old-m1", name="Old Wallet", merchant_id="M1", active=False),
    ]
