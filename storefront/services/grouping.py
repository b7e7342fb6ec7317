"""Partition cart line items by merchant"""

from typing import Iterable

from ..models.cart import CartLineItem


def group_by_merchant(items: Iterable[CartLineItem]) -> dict[str, list[CartLineItem]]:
    """Group items by merchant id, keeping first-seen merchant order and item order"""
    groups: dict[str, list[CartLineItem]] = {}
    for item in items:
        groups.setdefault(item.merchant_id, []).append(item)
    return groups


def merchant_ids(items: Iterable[CartLineItem]) -> set[str]:
    return {item.merchant_id for item in items}


def subtotal(items: Iterable[CartLineItem]) -> float:
    """Sum of unit price times quantity"""
    return sum((item.line_total for item in items), 0.0)
