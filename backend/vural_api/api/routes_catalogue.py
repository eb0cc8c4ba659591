from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from vural_api.api.deps import require_admin
from vural_api.db import get_db
from vural_api.schemas.product_schema import (
    CategoryIn,
    CategoryOut,
    CategoryUpdate,
    ProductIn,
    ProductOut,
    ProductUpdate,
)
from vural_api.services.catalog_service import CatalogService
from vural_api.services.errors import Conflict, NotFound

router = APIRouter(tags=["catalogue"])


@router.get("/products", summary="List products")
def list_products(
    q: Optional[str] = Query(None, description="search term"),
    category: Optional[str] = Query(None, description="category slug"),
    status: Optional[str] = None,
    stock_status: Optional[str] = Query(None, alias="stockStatus"),
    page: int = Query(1, ge=1),
    size: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
):
    svc = CatalogService(db)
    items, total = svc.list_products(
        q=q, category=category, status=status, stock_status=stock_status, page=page, size=size
    )
    return {
        "items": [ProductOut.model_validate(p).to_json() for p in items],
        "total": total,
    }


@router.get("/products/{product_id}", summary="Get product")
def get_product(product_id: str, db: Session = Depends(get_db)):
    try:
        p = CatalogService(db).get_product(product_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    return ProductOut.model_validate(p).to_json()


@router.post("/products", status_code=201, summary="Create product")
def create_product(payload: ProductIn, db: Session = Depends(get_db), _=Depends(require_admin)):
    try:
        p = CatalogService(db).add_product(payload.model_dump())
    except Conflict as e:
        raise HTTPException(status_code=409, detail=e.message)
    return ProductOut.model_validate(p).to_json()


@router.put("/products/{product_id}", summary="Update product")
def update_product(
    product_id: str, payload: ProductUpdate, db: Session = Depends(get_db), _=Depends(require_admin)
):
    p = CatalogService(db).update_product(product_id, payload.changes())
    return ProductOut.model_validate(p).to_json()


@router.delete("/products/{product_id}", summary="Delete product")
def delete_product(product_id: str, db: Session = Depends(get_db), _=Depends(require_admin)):
    CatalogService(db).delete_product(product_id)
    return {"success": True}


@router.get("/categories", summary="List categories")
def list_categories(db: Session = Depends(get_db)):
    return [CategoryOut.model_validate(c).to_json() for c in CatalogService(db).list_categories()]


@router.post("/categories", status_code=201, summary="Create category")
def create_category(payload: CategoryIn, db: Session = Depends(get_db), _=Depends(require_admin)):
    c = CatalogService(db).add_category(payload.name, payload.slug)
    return CategoryOut.model_validate(c).to_json()


@router.put("/categories/{category_id}", summary="Rename category (cascades slug to products)")
def update_category(
    category_id: str, payload: CategoryUpdate, db: Session = Depends(get_db), _=Depends(require_admin)
):
    c = CatalogService(db).update_category(category_id, name=payload.name, slug=payload.slug)
    return CategoryOut.model_validate(c).to_json()


@router.delete("/categories/{category_id}", summary="Delete category")
def delete_category(category_id: str, db: Session = Depends(get_db), _=Depends(require_admin)):
    CatalogService(db).delete_category(category_id)
    return {"success": True}
