"""Merchant and menu models"""

from pydantic import BaseModel, Field, model_validator
from typing import Optional


class Merchant(BaseModel):
    """
    Merchant snapshot consumed by the delivery quoting core.

    Coordinates are either both set or both absent. Fee bounds are not
    cross-checked here: a max below the min is resolved by the fee clamp.
    """
    id: str
    name: str
    category: str = "restaurant"
    active: bool = True
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    # Legacy flat fee, used when base_delivery_fee is unset
    delivery_fee: float = 0.0
    base_delivery_fee: Optional[float] = None
    delivery_fee_per_km: Optional[float] = None
    min_delivery_fee: Optional[float] = None
    max_delivery_fee: Optional[float] = None
    # None means unbounded
    max_delivery_distance_km: Optional[float] = None

    class Config:
        from_attributes = True

    @model_validator(mode="after")
    def check_coordinates(self) -> "Merchant":
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be set together")
        return self

    @property
    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class Variation(BaseModel):
    """Priced option picked from a variation group (e.g. Size)"""
    id: str
    name: str
    price: float = 0.0
    group: Optional[str] = None


class VariationGroup(BaseModel):
    """Named set of variations; at most one is picked, and a required group needs one"""
    name: str
    required: bool = False


class AddOn(BaseModel):
    """Priced extra that can be added one or more times"""
    id: str
    name: str
    price: float = Field(ge=0)
    category: str = "extras"


class MenuItem(BaseModel):
    """Item on a merchant's menu"""
    id: str
    merchant_id: str
    name: str
    description: str = ""
    base_price: float = Field(ge=0)
    category: str
    available: bool = True
    discount_price: Optional[float] = Field(default=None, ge=0)
    discount_active: bool = False
    variations: list[Variation] = []
    variation_groups: list[VariationGroup] = []
    add_ons: list[AddOn] = []

    @property
    def effective_price(self) -> float:
        """Discounted price when a discount is running, otherwise the base price"""
        if self.discount_active and self.discount_price is not None:
            return self.discount_price
        return self.base_price
