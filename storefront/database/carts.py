"""Cart storage for the storefront"""

import uuid
from datetime import datetime
from typing import Optional

from ..models.cart import Cart, CartLineItem
from ..models.merchant import MenuItem, Variation, AddOn
from ..services.grouping import subtotal
from ..services.rounding import round_to_currency


def configured_price(
    menu_item: MenuItem,
    variations: list[Variation],
    add_ons: list[AddOn],
) -> float:
    """Unit price of a menu item with its selected variations and add-ons"""
    price = menu_item.effective_price
    price += sum(v.price for v in variations)
    price += sum(a.price for a in add_ons)
    return round_to_currency(price)


class VariationSelectionError(ValueError):
    """Variations picked for a menu item break its group rules"""


def check_variation_selection(menu_item: MenuItem, variations: list[Variation]) -> None:
    """At most one variation per group, and one for every required group"""
    chosen: dict[str, Variation] = {}
    for variation in variations:
        if variation.group is None:
            continue
        if variation.group in chosen:
            raise VariationSelectionError(f"Choose only one {variation.group} for {menu_item.name}")
        chosen[variation.group] = variation

    for group in menu_item.variation_groups:
        if group.required and group.name not in chosen:
            raise VariationSelectionError(f"Please choose {group.name} for {menu_item.name}")


def _group_add_ons(add_ons: list[AddOn]) -> list[tuple[AddOn, int]]:
    """Collapse repeated add-ons into (add-on, count), keeping first-seen order"""
    counts: dict[str, int] = {}
    first: dict[str, AddOn] = {}
    for add_on in add_ons:
        counts[add_on.id] = counts.get(add_on.id, 0) + 1
        first.setdefault(add_on.id, add_on)
    return [(first[add_on_id], count) for add_on_id, count in counts.items()]


def line_item_id(menu_item: MenuItem, variations: list[Variation], add_ons: list[AddOn]) -> str:
    """Identity shared by every cart line with the same configuration"""
    variation_part = "|".join(sorted(v.id for v in variations)) or "default"
    add_on_part = ",".join(sorted(f"{a.id}-{n}" for a, n in _group_add_ons(add_ons))) or "none"
    return f"{menu_item.id}-{variation_part}-{add_on_part}"


def customization_labels(variations: list[Variation], add_ons: list[AddOn]) -> list[str]:
    labels = [v.name for v in variations]
    labels += [a.name if n == 1 else f"{a.name} x{n}" for a, n in _group_add_ons(add_ons)]
    return labels


class CartDatabase:
    """In-memory cart storage"""

    def __init__(self):
        self.carts: dict[str, Cart] = {}

    def create_cart(self) -> Cart:
        """Create a new cart"""
        now = datetime.utcnow()
        cart = Cart(
            cart_id=str(uuid.uuid4()),
            items=[],
            created_at=now,
            updated_at=now,
        )
        self.carts[cart.cart_id] = cart
        return cart

    def get_cart(self, cart_id: str) -> Optional[Cart]:
        """Get a cart by ID"""
        return self.carts.get(cart_id)

    def add_item(
        self,
        cart_id: str,
        menu_item: MenuItem,
        quantity: int = 1,
        variations: Optional[list[Variation]] = None,
        add_ons: Optional[list[AddOn]] = None,
    ) -> Optional[Cart]:
        """
        Add a configured menu item; an identical configuration bumps quantity.

        Raises VariationSelectionError when the variations break the item's
        group rules; the cart is left untouched.
        """
        cart = self.get_cart(cart_id)
        if not cart:
            return None

        variations = variations or []
        add_ons = add_ons or []
        check_variation_selection(menu_item, variations)
        item_id = line_item_id(menu_item, variations, add_ons)

        existing_item = next((item for item in cart.items if item.id == item_id), None)

        if existing_item:
            existing_item.quantity += quantity
        else:
            cart.items.append(CartLineItem(
                id=item_id,
                merchant_id=menu_item.merchant_id,
                menu_item_id=menu_item.id,
                name=menu_item.name,
                unit_price=configured_price(menu_item, variations, add_ons),
                quantity=quantity,
                customizations=customization_labels(variations, add_ons),
            ))

        self._recalculate_totals(cart)
        return cart

    def update_item_quantity(
        self,
        cart_id: str,
        item_id: str,
        quantity: int,
    ) -> Optional[Cart]:
        """Update item quantity in cart"""
        cart = self.get_cart(cart_id)
        if not cart:
            return None

        item = next((item for item in cart.items if item.id == item_id), None)
        if not item:
            return None

        if quantity <= 0:
            cart.items = [i for i in cart.items if i.id != item_id]
        else:
            item.quantity = quantity

        self._recalculate_totals(cart)
        return cart

    def remove_item(self, cart_id: str, item_id: str) -> Optional[Cart]:
        """Remove an item from the cart"""
        return self.update_item_quantity(cart_id, item_id, 0)

    def clear_cart(self, cart_id: str) -> Optional[Cart]:
        """Clear all items from cart"""
        cart = self.get_cart(cart_id)
        if not cart:
            return None

        cart.items = []
        self._recalculate_totals(cart)
        return cart

    def delete_cart(self, cart_id: str) -> bool:
        """Delete a cart"""
        if cart_id in self.carts:
            del self.carts[cart_id]
            return True
        return False

    def _recalculate_totals(self, cart: Cart) -> None:
        cart.subtotal = round_to_currency(subtotal(cart.items))
        cart.updated_at = datetime.utcnow()


# Singleton instance
cart_db = CartDatabase()
