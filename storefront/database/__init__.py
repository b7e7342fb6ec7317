# Database modules

from .merchants import merchant_db, MerchantDatabase
from .menu import menu_db, MenuDatabase
from .payment_methods import payment_method_db, PaymentMethodDatabase
from .carts import cart_db, CartDatabase

__all__ = [
    "merchant_db",
    "MerchantDatabase",
    "menu_db",
    "MenuDatabase",
    "payment_method_db",
    "PaymentMethodDatabase",
    "cart_db",
    "CartDatabase",
]
