from sqlalchemy.orm import Session
from sqlalchemy import extract, func
from Models.orders import Order
from typing import Dict, List, Optional
import logging

logger = logging.getLogger(__name__)

ALL = "all"


def _is_set(value: Optional[str]) -> bool:
    return value is not None and value != "" and value != ALL


def _apply_filters(query, year: Optional[str] = None, quarter: Optional[str] = None,
                   month: Optional[str] = None, store_id: Optional[str] = None):
    """
    Aplica os filtros do dashboard; "all" ou vazio significa sem filtro.

    Raises:
        ValueError: ano, trimestre ou mês que não são números válidos.
    """
    try:
        if _is_set(year):
            query = query.filter(extract("year", Order.order_date) == int(year))
        if _is_set(quarter):
            q = int(quarter)
            if q < 1 or q > 4:
                raise ValueError
            query = query.filter(extract("month", Order.order_date).between(q * 3 - 2, q * 3))
        if _is_set(month):
            query = query.filter(extract("month", Order.order_date) == int(month))
    except ValueError:
        raise ValueError("Filtro de período inválido. Use números para ano, trimestre (1-4) e mês")

    if _is_set(store_id):
        query = query.filter(Order.store_id == store_id)
    return query


def _round(value) -> Optional[float]:
    return None if value is None else round(float(value), 2)


def total_customers(db: Session) -> Dict:
    """
    Quantidade de clientes distintos que já fizeram pedidos.

    Args:
        db (Session): Sessão do SQLAlchemy.

    Returns:
        Dict: {"TOTAL": quantidade}
    """
    total = db.query(func.count(func.distinct(Order.customer_id))).scalar()
    return {"TOTAL": total or 0}


def avg_order_value(db: Session) -> Dict:
    """
    Ticket médio de todos os pedidos, com duas casas decimais.

    Args:
        db (Session): Sessão do SQLAlchemy.

    Returns:
        Dict: {"AVG_VALUE": valor}; None se não houver pedidos com total.
    """
    return {"AVG_VALUE": _round(db.query(func.avg(Order.total)).scalar())}


def avg_orders_per_customer(db: Session, year: Optional[str] = None, store_id: Optional[str] = None) -> Dict:
    """
    Média de pedidos por cliente no período/loja filtrados.

    Args:
        db (Session): Sessão do SQLAlchemy.
        year (str): Ano ou "all".
        store_id (str): Loja ou "all".

    Returns:
        Dict: {"AVG_ORDERS": média}; 0 quando não há pedidos.
    """
    per_customer = db.query(
        Order.customer_id,
        func.count(Order.order_id).label("order_count"),
    ).filter(Order.customer_id.isnot(None))
    per_customer = _apply_filters(per_customer, year=year, store_id=store_id)
    per_customer = per_customer.group_by(Order.customer_id).subquery()

    average = db.query(func.avg(per_customer.c.order_count)).scalar()
    return {"AVG_ORDERS": _round(average) or 0}


def total_stores_count(db: Session) -> Dict:
    """
    Quantidade de lojas distintas presentes nos pedidos.
    """
    total = db.query(func.count(func.distinct(Order.store_id))).scalar()
    return {"totalStores": total or 0}


def avg_order_value_by_store(db: Session, year: Optional[str] = None, quarter: Optional[str] = None,
                             month: Optional[str] = None, store_id: Optional[str] = None) -> List[Dict]:
    """
    Ticket médio por loja, ordenado pelo código da loja.

    Args:
        db (Session): Sessão do SQLAlchemy.
        year (str): Ano ou "all".
        quarter (str): Trimestre (1-4) ou "all".
        month (str): Mês (1-12) ou "all".
        store_id (str): Loja ou "all".

    Returns:
        List[Dict]: [{"storeId": ..., "avgOrderValue": ...}, ...]
    """
    query = db.query(Order.store_id, func.avg(Order.total)).filter(Order.store_id.isnot(None))
    query = _apply_filters(query, year=year, quarter=quarter, month=month, store_id=store_id)
    rows = query.group_by(Order.store_id).order_by(Order.store_id).all()

    logger.debug(f"Ticket médio calculado para {len(rows)} lojas")
    return [{"storeId": store, "avgOrderValue": _round(avg)} for store, avg in rows]
