from sqlalchemy import Column, Integer, Float, String, Date
from .base import Base

class Order(Base):
    """Pedido de uma loja; lido apenas pelos indicadores em Services/orders_kpi_services.py"""
    __tablename__ = "orders"

    order_id = Column(String(50), primary_key=True)
    order_date = Column(Date)
    customer_id = Column(String(50))
    store_id = Column(String(50))
    n_items = Column(Integer, nullable=False, default=0)
    total = Column(Float, nullable=True)
