"""Cart models for the storefront"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class CartLineItem(BaseModel):
    """
    Configured item in a shopping cart.

    unit_price already includes the selected variations and add-ons;
    customizations are display labels only.
    """
    id: str
    merchant_id: str
    menu_item_id: str
    name: str
    unit_price: float = Field(ge=0)
    quantity: int = Field(gt=0)
    customizations: list[str] = []

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity


class Cart(BaseModel):
    """Shopping cart spanning any number of merchants"""
    cart_id: str
    items: list[CartLineItem] = []
    subtotal: float = 0.0
    created_at: datetime
    updated_at: datetime


class AddToCartRequest(BaseModel):
    """Request to add a configured menu item to the cart"""
    menu_item_id: str
    quantity: int = Field(default=1, gt=0)
    variation_ids: list[str] = []
    # Repeat an id to add the same add-on more than once
    add_on_ids: list[str] = []


class UpdateCartItemRequest(BaseModel):
    """Request to update cart item quantity (0 removes the item)"""
    quantity: int = Field(ge=0)


class CartResponse(BaseModel):
    """Cart API response"""
    cart: Cart
    message: Optional[str] = None
