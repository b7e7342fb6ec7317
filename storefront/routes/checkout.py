"""Delivery quote and checkout API routes"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException

from ..core.config import settings
from ..models.checkout import CheckoutRequest, CheckoutResponse
from ..models.delivery import QuoteRequest, QuoteResponse
from ..models.payment import PaymentMethod
from ..database.carts import cart_db
from ..database.merchants import merchant_db
from ..database.payment_methods import payment_method_db
from ..services.checkout import CheckoutPipeline
from ..services.orders import OrderAggregator, messenger_link

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])

pipeline: Optional[CheckoutPipeline] = None


def get_pipeline() -> CheckoutPipeline:
    """Get or create the checkout pipeline"""
    global pipeline
    if pipeline is None:
        pipeline = CheckoutPipeline(
            aggregator=OrderAggregator(
                brand_name=settings.brand_name,
                currency_symbol=settings.currency_symbol,
            ),
            default_per_km_rate=settings.default_delivery_fee_per_km,
        )
    return pipeline


@router.post("/quotes", response_model=QuoteResponse)
async def quote_delivery(request: QuoteRequest):
    """Quote delivery for every merchant in the cart"""
    cart = cart_db.get_cart(request.cart_id)
    if not cart:
        raise HTTPException(status_code=404, detail="Cart not found")

    quotes = get_pipeline().quote(cart.items, merchant_db.snapshot(), request.destination)
    return QuoteResponse(
        quotes=list(quotes.values()),
        all_deliverable=all(q.deliverable for q in quotes.values()),
    )


@router.get("/{cart_id}/payment-methods", response_model=list[PaymentMethod])
async def list_payment_methods(cart_id: str):
    """Payment methods offerable for the merchants in the cart"""
    cart = cart_db.get_cart(cart_id)
    if not cart:
        raise HTTPException(status_code=404, detail="Cart not found")

    return get_pipeline().payment_options(cart.items, payment_method_db.list_active())


@router.post("", response_model=CheckoutResponse)
async def checkout(request: CheckoutRequest):
    """
    Build the combined order for a cart.

    A blocked order is returned with success=False and the reasons;
    a placeable order clears the cart and returns the messenger link.
    """
    cart = cart_db.get_cart(request.cart_id)
    if not cart:
        raise HTTPException(status_code=404, detail="Cart not found")

    if not cart.items:
        raise HTTPException(status_code=400, detail="Cart is empty")

    summary = get_pipeline().run(
        cart.items,
        merchant_db.snapshot(),
        payment_method_db.list_active(),
        request.destination,
        request.customer,
        payment_method_id=request.payment_method_id,
    )

    if not summary.can_place_order:
        logger.info(
            f"Checkout blocked for cart {request.cart_id}: "
            f"{[b.kind.value for b in summary.blockers]}"
        )
        return CheckoutResponse(
            success=False,
            summary=summary,
            blockers=summary.blockers,
            error_message=summary.blockers[0].detail,
        )

    cart_db.clear_cart(request.cart_id)

    logger.info(
        f"Order for cart {request.cart_id} ready: {settings.currency_symbol}{summary.grand_total:.2f} "
        f"across {len(summary.merchant_subtotals)} merchant(s)"
    )

    return CheckoutResponse(
        success=True,
        summary=summary,
        messenger_url=messenger_link(
            summary,
            page_id=settings.messenger_page_id,
            base_url=settings.messenger_base_url,
        ),
    )
