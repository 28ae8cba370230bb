from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Optional
from Services import orders_kpi_services as kpi
from Database.db import get_db
import logging

router = APIRouter(prefix="/api/kpi", tags=["kpi"])
logger = logging.getLogger(__name__)


def _run(db: Session, name: str, report, *args, **kwargs):
    try:
        return report(db, *args, **kwargs)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SQLAlchemyError as e:
        logger.error(f"Erro ao calcular KPI {name}: {str(e)}")
        db.rollback()
        raise HTTPException(status_code=500, detail="Erro interno do servidor")


@router.get("/total-customers")
def get_total_customers(db: Session = Depends(get_db)):
    """Clientes distintos com pedidos"""
    return _run(db, "total-customers", kpi.total_customers)


@router.get("/avg-order-value")
def get_avg_order_value(db: Session = Depends(get_db)):
    """Ticket médio geral"""
    return _run(db, "avg-order-value", kpi.avg_order_value)


@router.get("/avg-orders-per-customer")
def get_avg_orders_per_customer(
    db: Session = Depends(get_db),
    year: Optional[str] = None,
    storeId: Optional[str] = None
):
    """Média de pedidos por cliente, com filtro por ano e loja"""
    return _run(db, "avg-orders-per-customer", kpi.avg_orders_per_customer, year=year, store_id=storeId)


@router.get("/total-stores-count")
def get_total_stores_count(db: Session = Depends(get_db)):
    """Quantidade de lojas com pedidos"""
    return _run(db, "total-stores-count", kpi.total_stores_count)


@router.get("/avg-order-value-by-store")
def get_avg_order_value_by_store(
    db: Session = Depends(get_db),
    year: Optional[str] = None,
    quarter: Optional[str] = None,
    month: Optional[str] = None,
    storeId: Optional[str] = None
):
    """Ticket médio por loja, com filtros de período e loja"""
    return _run(
        db, "avg-order-value-by-store", kpi.avg_order_value_by_store,
        year=year, quarter=quarter, month=month, store_id=storeId,
    )
