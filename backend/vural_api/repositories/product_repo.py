from typing import List, Optional, Tuple

from sqlalchemy import or_

from vural_api.models.category import Category
from vural_api.models.product import Product
from vural_api.repositories.base import CrudRepository


class ProductRepository(CrudRepository[Product]):
    model = Product
    id_prefix = "prd-"
    order_by = Product.name.asc()

    def get_by_sku(self, sku: str) -> Optional[Product]:
        return self.db.query(Product).filter(Product.sku == sku).first()

    def search(
        self,
        q: Optional[str] = None,
        category: Optional[str] = None,
        status: Optional[str] = None,
        stock_status: Optional[str] = None,
        page: int = 1,
        size: int = 100,
    ) -> Tuple[List[Product], int]:
        query = self.db.query(Product)
        if category:
            query = query.filter(Product.category == category)
        if status:
            query = query.filter(Product.status == status)
        if stock_status:
            query = query.filter(Product.stock_status == stock_status)
        if q:
            like = f"%{q}%"
            query = query.filter(
                or_(Product.name.ilike(like), Product.sku.ilike(like), Product.description.ilike(like))
            )
        total = query.count()
        items = query.order_by(Product.name).offset((page - 1) * size).limit(size).all()
        return items, total

    def by_category(self, slug: str) -> List[Product]:
        return self.db.query(Product).filter(Product.category == slug).all()

    def rename_category(self, old_slug: str, new_slug: str) -> int:
        """Point every product in ``old_slug`` at ``new_slug``; returns the number of rows touched."""
        touched = (
            self.db.query(Product)
            .filter(Product.category == old_slug)
            .update({Product.category: new_slug}, synchronize_session="fetch")
        )
        self.db.flush()
        return touched


class CategoryRepository(CrudRepository[Category]):
    model = Category
    id_prefix = "cat-"
    order_by = Category.name.asc()

    def get_by_slug(self, slug: str) -> Optional[Category]:
        return self.db.query(Category).filter(Category.slug == slug).first()
