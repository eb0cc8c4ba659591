from datetime import date
from typing import List, Literal, Optional

from pydantic import Field, model_validator

from vural_api.schemas.common import CamelModel


class PackageProductIn(CamelModel):
    product_id: str
    quantity: int = Field(1, ge=1)
    unit_price: Optional[float] = Field(None, ge=0)


class PackageProductOut(CamelModel):
    product_id: str
    product_name: Optional[str] = None
    quantity: int
    unit_price: float
    image_url: Optional[str] = None


class SolarPackageIn(CamelModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    min_bill: float = Field(ge=0)
    max_bill: float = Field(ge=0)
    system_power: Optional[str] = None
    total_price: Optional[float] = Field(None, ge=0)
    installation_cost: float = Field(0, ge=0)
    image_url: Optional[str] = None
    savings: Optional[str] = None
    payback_period: Optional[str] = None
    panel_count: Optional[int] = Field(None, ge=0)
    status: Literal["active", "inactive"] = "active"
    products: List[PackageProductIn] = []

    @model_validator(mode="after")
    def _bill_range(self):
        if self.min_bill > self.max_bill:
            raise ValueError("minBill must not exceed maxBill")
        return self


class SolarPackageUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    min_bill: Optional[float] = Field(None, ge=0)
    max_bill: Optional[float] = Field(None, ge=0)
    system_power: Optional[str] = None
    total_price: Optional[float] = Field(None, ge=0)
    installation_cost: Optional[float] = Field(None, ge=0)
    image_url: Optional[str] = None
    savings: Optional[str] = None
    payback_period: Optional[str] = None
    panel_count: Optional[int] = Field(None, ge=0)
    status: Optional[Literal["active", "inactive"]] = None
    products: Optional[List[PackageProductIn]] = None


class SolarPackageOut(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    min_bill: float
    max_bill: float
    system_power: Optional[str] = None
    total_price: float
    installation_cost: float
    image_url: Optional[str] = None
    savings: Optional[str] = None
    payback_period: Optional[str] = None
    panel_count: Optional[int] = None
    status: str
    created_date: date
    products: List[PackageProductOut] = []
