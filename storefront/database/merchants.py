"""Merchant catalog"""

from typing import Optional
from ..models.merchant import Merchant

# Seed catalog (Metro Manila)
MERCHANTS: dict[str, Merchant] = {
    "merchant-001": Merchant(
        id="merchant-001",
        name="Lola's Kitchen",
        category="restaurant",
        address="Ermita, Manila",
        latitude=14.5995,
        longitude=120.9842,
        delivery_fee=20.0,
        base_delivery_fee=20.0,
        delivery_fee_per_km=4.0,
        max_delivery_distance_km=5.0,
    ),
    "merchant-002": Merchant(
        id="merchant-002",
        name="Dumpling House",
        category="fast-food",
        address="Poblacion, Makati",
        latitude=14.5547,
        longitude=121.0244,
        base_delivery_fee=30.0,
        delivery_fee_per_km=5.0,
        min_delivery_fee=50.0,
        max_delivery_fee=120.0,
        max_delivery_distance_km=10.0,
    ),
    "merchant-003": Merchant(
        id="merchant-003",
        name="Corner Bakery",
        category="bakery",
        address="Quiapo, Manila",
        delivery_fee=25.0,
    ),
}


class MerchantDatabase:
    """In-memory merchant catalog"""

    def __init__(self):
        self.merchants = MERCHANTS.copy()

    def get_merchant(self, merchant_id: str) -> Optional[Merchant]:
        """Get a merchant by ID"""
        return self.merchants.get(merchant_id)

    def list_merchants(self, active_only: bool = True) -> list[Merchant]:
        """List merchants in catalog order"""
        return [m for m in self.merchants.values() if m.active or not active_only]

    def snapshot(self) -> dict[str, Merchant]:
        """Copy of the catalog for one quoting pass"""
        return {m.id: m.model_copy() for m in self.merchants.values()}


# Singleton instance
merchant_db = MerchantDatabase()
