"""Payment method models"""

from pydantic import BaseModel
from typing import Optional
from enum import Enum


class PaymentScope(str, Enum):
    GLOBAL = "global"
    MERCHANT = "merchant"


class PaymentMethod(BaseModel):
    """Payment method offered at checkout (merchant_id None means any merchant)"""
    id: str
    name: str
    merchant_id: Optional[str] = None
    active: bool = True
    account_number: Optional[str] = None
    account_name: Optional[str] = None
    qr_code_url: Optional[str] = None
    sort_order: int = 0

    @property
    def scope(self) -> PaymentScope:
        return PaymentScope.GLOBAL if self.merchant_id is None else PaymentScope.MERCHANT
