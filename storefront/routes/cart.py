"""Cart API routes"""

from fastapi import APIRouter, HTTPException

from ..models.cart import (
    AddToCartRequest,
    UpdateCartItemRequest,
    CartResponse,
)
from ..database.carts import cart_db, VariationSelectionError
from ..database.menu import menu_db

router = APIRouter(prefix="/api/cart", tags=["Cart"])


@router.post("", response_model=CartResponse)
async def create_cart():
    """Create a new shopping cart"""
    cart = cart_db.create_cart()
    return CartResponse(cart=cart, message="Cart created")


@router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(cart_id: str):
    """Get cart by ID"""
    cart = cart_db.get_cart(cart_id)
    if not cart:
        raise HTTPException(status_code=404, detail="Cart not found")
    return CartResponse(cart=cart)


@router.post("/{cart_id}/items", response_model=CartResponse)
async def add_to_cart(cart_id: str, request: AddToCartRequest):
    """Add a configured menu item to the cart"""
    cart = cart_db.get_cart(cart_id)
    if not cart:
        raise HTTPException(status_code=404, detail="Cart not found")

    menu_item = menu_db.get_item(request.menu_item_id)
    if not menu_item:
        raise HTTPException(status_code=404, detail="Menu item not found")

    if not menu_item.available:
        raise HTTPException(status_code=400, detail=f"{menu_item.name} is not available")

    variations_by_id = {v.id: v for v in menu_item.variations}
    add_ons_by_id = {a.id: a for a in menu_item.add_ons}

    unknown = [v for v in request.variation_ids if v not in variations_by_id]
    unknown += [a for a in request.add_on_ids if a not in add_ons_by_id]
    if unknown:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown options for {menu_item.name}: {', '.join(unknown)}",
        )

    try:
        updated_cart = cart_db.add_item(
            cart_id,
            menu_item,
            request.quantity,
            variations=[variations_by_id[v] for v in request.variation_ids],
            add_ons=[add_ons_by_id[a] for a in request.add_on_ids],
        )
    except VariationSelectionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return CartResponse(
        cart=updated_cart,
        message=f"Added {request.quantity}x {menu_item.name} to cart",
    )


@router.put("/{cart_id}/items/{item_id}", response_model=CartResponse)
async def update_cart_item(cart_id: str, item_id: str, request: UpdateCartItemRequest):
    """Update item quantity in cart"""
    cart = cart_db.get_cart(cart_id)
    if not cart:
        raise HTTPException(status_code=404, detail="Cart not found")

    updated_cart = cart_db.update_item_quantity(cart_id, item_id, request.quantity)
    if not updated_cart:
        raise HTTPException(status_code=404, detail="Item not in cart")

    return CartResponse(cart=updated_cart, message="Cart updated")


@router.delete("/{cart_id}/items/{item_id}", response_model=CartResponse)
async def remove_from_cart(cart_id: str, item_id: str):
    """Remove an item from the cart"""
    cart = cart_db.get_cart(cart_id)
    if not cart:
        raise HTTPException(status_code=404, detail="Cart not found")

    updated_cart = cart_db.remove_item(cart_id, item_id)
    if not updated_cart:
        raise HTTPException(status_code=404, detail="Item not in cart")

    return CartResponse(cart=updated_cart, message="Item removed")


@router.delete("/{cart_id}", response_model=CartResponse)
async def clear_cart(cart_id: str):
    """Clear all items from cart"""
    cart = cart_db.get_cart(cart_id)
    if not cart:
        raise HTTPException(status_code=404, detail="Cart not found")

    updated_cart = cart_db.clear_cart(cart_id)
    return CartResponse(cart=updated_cart, message="Cart cleared")
