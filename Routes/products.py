from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional
from Models.products import Product
from Services.products_services import SqlProductRepository
from Database.db import get_db
from pydantic import BaseModel, field_validator
from datetime import date
import logging

router = APIRouter(prefix="/api/products", tags=["products"])
logger = logging.getLogger(__name__)

# Schemas para requests/responses
class ProductSchema(BaseModel):
    sku: str
    name: Optional[str] = None
    price: Optional[float] = 0.0
    category: Optional[str] = None
    size: Optional[str] = None
    ingredient: Optional[str] = None
    launch: Optional[date] = None

    @field_validator("price", mode="before")
    @classmethod
    def price_default(cls, value):
        return 0.0 if value is None else value

    class Config:
        from_attributes = True


def _internal_error(db: Session, action: str, error: Exception) -> HTTPException:
    logger.error(f"Erro ao {action}: {str(error)}")
    db.rollback()
    return HTTPException(status_code=500, detail="Erro interno do servidor")


@router.get("", response_model=List[ProductSchema])
def get_all_products(db: Session = Depends(get_db)):
    """
    Lista todos os produtos
    """
    try:
        return SqlProductRepository(db).find_all()
    except SQLAlchemyError as e:
        raise _internal_error(db, "listar produtos", e)


@router.get("/category/{category}", response_model=List[ProductSchema])
def get_products_by_category(category: str, db: Session = Depends(get_db)):
    """
    Lista os produtos de uma categoria
    """
    try:
        return SqlProductRepository(db).find_by_category(category)
    except SQLAlchemyError as e:
        raise _internal_error(db, "buscar produtos por categoria", e)


@router.get("/{sku}", response_model=Optional[ProductSchema])
def get_product(sku: str, db: Session = Depends(get_db)):
    """
    Busca um produto pelo SKU; responde null se ele não existir
    """
    try:
        product = SqlProductRepository(db).find_by_id(sku)
    except SQLAlchemyError as e:
        raise _internal_error(db, "buscar produto", e)

    if product is None:
        logger.warning(f"Produto {sku} não encontrado")
    return product


@router.post("", response_model=ProductSchema)
def add_product(product_data: ProductSchema, db: Session = Depends(get_db)):
    """
    Cria um produto ou substitui o existente com o mesmo SKU
    """
    try:
        return SqlProductRepository(db).save(Product(**product_data.model_dump()))
    except SQLAlchemyError as e:
        raise _internal_error(db, "salvar produto", e)


@router.delete("/{sku}")
def delete_product(sku: str, db: Session = Depends(get_db)):
    """
    Exclui um produto pelo SKU
    """
    try:
        SqlProductRepository(db).delete_by_id(sku)
    except SQLAlchemyError as e:
        raise _internal_error(db, "excluir produto", e)
    return Response(status_code=status.HTTP_200_OK)
