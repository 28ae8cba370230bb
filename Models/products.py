from sqlalchemy import Column, String, Float, Date
from .base import Base

class Product(Base):
    __tablename__ = "products"

    sku = Column(String(50), primary_key=True)
    name = Column(String(100))
    price = Column(Float, nullable=False, default=0.0)
    category = Column(String(100))
    size = Column(String(20))
    ingredient = Column(String(100))
    launch = Column(Date)

    def __repr__(self):
        return f"<Product sku={self.sku!r} name={self.name!r} price={self.price!r}>"
