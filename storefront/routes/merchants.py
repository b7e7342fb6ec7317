"""Merchant API routes"""

from fastapi import APIRouter, HTTPException

from ..models.merchant import Merchant, MenuItem
from ..database.merchants import merchant_db
from ..database.menu import menu_db

router = APIRouter(prefix="/api/merchants", tags=["Merchants"])


@router.get("", response_model=list[Merchant])
async def list_merchants():
    """List active merchants"""
    return merchant_db.list_merchants()


@router.get("/{merchant_id}", response_model=Merchant)
async def get_merchant(merchant_id: str):
    """Get a merchant by ID"""
    merchant = merchant_db.get_merchant(merchant_id)
    if not merchant:
        raise HTTPException(status_code=404, detail="Merchant not found")
    return merchant


@router.get("/{merchant_id}/menu", response_model=list[MenuItem])
async def get_menu(merchant_id: str):
    """List a merchant's available menu items"""
    if not merchant_db.get_merchant(merchant_id):
        raise HTTPException(status_code=404, detail="Merchant not found")
    return menu_db.list_for_merchant(merchant_id)
