"""Menu item catalog"""

from typing import Optional
from ..models.merchant import MenuItem, Variation, VariationGroup, AddOn

MENU_ITEMS: dict[str, MenuItem] = {
    "item-001": MenuItem(
        id="item-001",
        merchant_id="merchant-001",
        name="Chicken Adobo",
        description="Braised in soy, vinegar and garlic. Served with rice.",
        base_price=150.00,
        category="mains",
        variations=[
            Variation(id="var-001", name="Regular", price=0.0, group="Size"),
            Variation(id="var-002", name="Large", price=40.0, group="Size"),
        ],
        variation_groups=[VariationGroup(name="Size", required=True)],
        add_ons=[
            AddOn(id="addon-001", name="Extra Rice", price=20.0, category="sides"),
            AddOn(id="addon-002", name="Fried Egg", price=15.0, category="sides"),
        ],
    ),
    "item-002": MenuItem(
        id="item-002",
        merchant_id="merchant-001",
        name="Halo-Halo",
        description="Shaved ice with sweet beans, leche flan and ube.",
        base_price=95.00,
        category="desserts",
        discount_price=80.00,
        discount_active=True,
    ),
    "item-003": MenuItem(
        id="item-003",
        merchant_id="merchant-002",
        name="Pork Siomai (6 pcs)",
        description="Steamed pork dumplings with chili garlic.",
        base_price=100.00,
        category="dumplings",
        add_ons=[
            AddOn(id="addon-003", name="Chili Garlic", price=10.0, category="sauces"),
        ],
    ),
    "item-004": MenuItem(
        id="item-004",
        merchant_id="merchant-002",
        name="Xiao Long Bao (8 pcs)",
        description="Soup dumplings.",
        base_price=220.00,
        category="dumplings",
    ),
    "item-005": MenuItem(
        id="item-005",
        merchant_id="merchant-003",
        name="Pandesal (10 pcs)",
        description="Freshly baked bread rolls.",
        base_price=50.00,
        category="bread",
    ),
}


class MenuDatabase:
    """In-memory menu catalog"""

    def __init__(self):
        self.items = MENU_ITEMS.copy()

    def get_item(self, item_id: str) -> Optional[MenuItem]:
        """Get a menu item by ID"""
        return self.items.get(item_id)

    def list_for_merchant(self, merchant_id: str, available_only: bool = True) -> list[MenuItem]:
        """Menu items of one merchant"""
        return [
            item for item in self.items.values()
            if item.merchant_id == merchant_id and (item.available or not available_only)
        ]


# Singleton instance
menu_db = MenuDatabase()
