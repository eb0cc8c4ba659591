import logging
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from vural_api.adapters.storage_mirror import PRODUCTS, StorageMirror, get_mirror
from vural_api.models.category import Category
from vural_api.models.product import Product
from vural_api.repositories.product_repo import CategoryRepository, ProductRepository
from vural_api.schemas.product_schema import ProductOut
from vural_api.services.errors import Conflict, InvalidInput, NotFound
from vural_api.utils.stock import stock_status
from vural_api.utils.text import generate_product_seo, slugify

log = logging.getLogger(__name__)

NULLABLE_FIELDS = {"description", "brand", "image_url", "detailed_specs"}


class CatalogService:
    """Products and categories. Products point at categories by slug."""

    def __init__(self, db: Session, mirror: Optional[StorageMirror] = None):
        self.db = db
        self.products = ProductRepository(db)
        self.categories = CategoryRepository(db)
        self.mirror = mirror or get_mirror()

    # --- products ---

    def list_products(self, **filters) -> Tuple[List[Product], int]:
        return self.products.search(**filters)

    def get_product(self, product_id: str) -> Product:
        p = self.products.get(product_id)
        if not p:
            raise NotFound("Product not found")
        return p

    def _seo_for(self, p: Product) -> dict:
        images = [p.image_url] + list(p.images or [])
        return generate_product_seo(p.name, p.description, p.category, p.brand, images)

    def add_product(self, fields: dict) -> Product:
        if self.products.get_by_sku(fields["sku"]):
            raise Conflict(f"SKU already exists: {fields['sku']}")
        if fields.get("stock", 0) < 0:
            raise InvalidInput("Invalid price or stock value")
        fields["stock_status"] = stock_status(fields.get("stock", 0))
        p = self.products.add(fields)
        p.seo = self._seo_for(p)
        p.slug = p.seo["slug"]
        self._commit()
        log.info("product created id=%s sku=%s", p.id, p.sku)
        return p

    def update_product(self, product_id: str, changes: dict) -> Product:
        p = self.get_product(product_id)
        new_sku = changes.get("sku")
        if new_sku and new_sku != p.sku and self.products.get_by_sku(new_sku):
            raise Conflict(f"SKU already exists: {new_sku}")
        if changes.get("stock") is not None and changes["stock"] < 0:
            raise InvalidInput("Invalid price or stock value")
        changes = {k: v for k, v in changes.items() if v is not None or k in NULLABLE_FIELDS}
        self.products.update(p, changes)
        # derived fields follow every mutation
        p.stock_status = stock_status(p.stock)
        if {"name", "description", "category", "brand", "image_url", "images"} & changes.keys():
            p.seo = self._seo_for(p)
            p.slug = p.seo["slug"]
        self._commit()
        log.info("product updated id=%s fields=%s", p.id, sorted(changes))
        return p

    def delete_product(self, product_id: str) -> None:
        p = self.get_product(product_id)
        self.products.delete(p)
        self._commit()
        log.info("product deleted id=%s", product_id)

    # --- categories ---

    def list_categories(self) -> List[Category]:
        return self.categories.list()

    def get_category(self, category_id: str) -> Category:
        c = self.categories.get(category_id)
        if not c:
            raise NotFound("Category not found")
        return c

    def _clean_slug(self, name: str, slug: Optional[str]) -> str:
        slug = slugify(slug) if slug else slugify(name)
        if not slug:
            raise InvalidInput("Category name must contain at least one letter or digit")
        return slug

    def add_category(self, name: str, slug: Optional[str] = None) -> Category:
        slug = self._clean_slug(name, slug)
        if self.categories.get_by_slug(slug):
            raise Conflict("Bu kısa kod (slug) zaten kullanılıyor. Lütfen farklı bir isim deneyin.")
        c = self.categories.add({"name": name.strip(), "slug": slug})
        self.db.commit()
        log.info("category created id=%s slug=%s", c.id, c.slug)
        return c

    def update_category(self, category_id: str, name: Optional[str] = None, slug: Optional[str] = None) -> Category:
        """
        Rename a category. Without an explicit slug a new name re-derives it.
        A slug change is cascaded to every product that
        referenced the old slug, in the same commit as the category itself.
        """
        c = self.get_category(category_id)
        new_name = name.strip() if name else c.name
        if slug is not None or (name and new_name != c.name):
            new_slug = self._clean_slug(new_name, slug)
        else:
            new_slug = c.slug
        dup = self.categories.get_by_slug(new_slug)
        if dup and dup.id != c.id:
            raise Conflict("Bu kısa kod (slug) zaten kullanılıyor. Lütfen farklı bir isim deneyin.")

        old_slug = c.slug
        moved = 0
        try:
            self.categories.update(c, {"name": new_name, "slug": new_slug})
            if new_slug != old_slug:
                moved = self.products.rename_category(old_slug, new_slug)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        if moved:
            log.info("category slug %s -> %s moved %d products", old_slug, new_slug, moved)
            self._mirror_products()
        return c

    def delete_category(self, category_id: str) -> None:
        c = self.get_category(category_id)
        in_use = len(self.products.by_category(c.slug))
        if in_use:
            raise Conflict(f"Category '{c.slug}' is still used by {in_use} products")
        self.categories.delete(c)
        self.db.commit()
        log.info("category deleted id=%s", category_id)

    # --- mirror ---

    def _commit(self):
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self._mirror_products()

    def _mirror_products(self):
        rows = self.db.query(Product).order_by(Product.name).all()
        self.mirror.safe_write(PRODUCTS, [ProductOut.model_validate(p).to_json() for p in rows])
