from typing import List, Literal, Optional

from pydantic import Field

from vural_api.schemas.common import CamelModel

ProductStatus = Literal["active", "draft", "archived"]


class ProductSeo(CamelModel):
    title: str
    description: str
    keywords: str
    slug: str
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image: Optional[str] = None


class ProductIn(CamelModel):
    name: str = Field(min_length=1)
    sku: str = Field(min_length=1)
    category: str = Field(min_length=1)
    price: float = Field(0, ge=0)
    stock: int = Field(0, ge=0)
    status: ProductStatus = "active"
    image_url: Optional[str] = None
    images: List[str] = []
    specs: List[str] = []
    detailed_specs: Optional[str] = None
    description: Optional[str] = None
    brand: Optional[str] = None
    is_new: bool = False
    is_premium: bool = False


class ProductUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    sku: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = None
    status: Optional[ProductStatus] = None
    image_url: Optional[str] = None
    images: Optional[List[str]] = None
    specs: Optional[List[str]] = None
    detailed_specs: Optional[str] = None
    description: Optional[str] = None
    brand: Optional[str] = None
    is_new: Optional[bool] = None
    is_premium: Optional[bool] = None


class ProductOut(CamelModel):
    id: str
    sku: str
    name: str
    category: str
    price: float
    stock: int
    status: str
    stock_status: str
    image_url: Optional[str] = None
    images: List[str] = []
    specs: List[str] = []
    detailed_specs: Optional[str] = None
    description: Optional[str] = None
    brand: Optional[str] = None
    is_new: bool = False
    is_premium: bool = False
    slug: Optional[str] = None
    seo: Optional[ProductSeo] = None


class CategoryIn(CamelModel):
    name: str = Field(min_length=1)
    slug: Optional[str] = None


class CategoryUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = None


class CategoryOut(CamelModel):
    id: str
    name: str
    slug: str
