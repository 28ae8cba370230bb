from .base import Base
from .products import Product
from .orders import Order

__all__ = ["Base", "Product", "Order"]
