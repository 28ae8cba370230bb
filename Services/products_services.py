from abc import ABC, abstractmethod
from sqlalchemy.orm import Session
from Models.products import Product
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


class ProductRepository(ABC):
    """
    Operações de armazenamento sobre o catálogo de produtos, indexado por SKU.
    """

    @abstractmethod
    def find_all(self) -> List[Product]:
        ...

    @abstractmethod
    def find_by_id(self, sku: str) -> Optional[Product]:
        ...

    @abstractmethod
    def save(self, product: Product) -> Product:
        ...

    @abstractmethod
    def delete_by_id(self, sku: str) -> None:
        ...

    @abstractmethod
    def find_by_category(self, category: str) -> List[Product]:
        ...


class SqlProductRepository(ProductRepository):
    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[Product]:
        """
        Lista todos os produtos cadastrados
        """
        return self.db.query(Product).order_by(Product.sku).all()

    def find_by_id(self, sku: str) -> Optional[Product]:
        """
        Busca produto pelo SKU
        """
        return self.db.get(Product, sku)

    def save(self, product: Product) -> Product:
        """
        Insere o produto ou substitui por completo o registro com o mesmo SKU
        """
        persisted = self.find_by_id(product.sku)
        if persisted is None:
            persisted = Product(sku=product.sku)
            self.db.add(persisted)

        # Campos não informados voltam para o default da coluna (ou None)
        for column in Product.__table__.columns:
            if column.primary_key:
                continue
            value = getattr(product, column.key)
            if value is None and column.default is not None:
                value = column.default.arg
            setattr(persisted, column.key, value)

        self.db.commit()
        self.db.refresh(persisted)

        logger.info(f"Produto {persisted.sku} salvo: {persisted.name}")
        return persisted

    def delete_by_id(self, sku: str) -> None:
        """
        Exclui o produto pelo SKU; não faz nada se ele não existir
        """
        product = self.find_by_id(sku)
        if not product:
            logger.info(f"Produto {sku} não existe, nada a excluir")
            return

        self.db.delete(product)
        self.db.commit()

        logger.info(f"Produto {sku} excluído")

    def find_by_category(self, category: str) -> List[Product]:
        """
        Lista produtos cuja categoria é exatamente a informada
        """
        if category is None:
            return []
        return self.db.query(Product).filter(Product.category == category).order_by(Product.sku).all()
