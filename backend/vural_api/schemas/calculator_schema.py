from typing import Literal, Optional

from pydantic import Field

from vural_api.schemas.common import CamelModel

Tariff = Literal["home", "business"]


class EstimateOut(CamelModel):
    bill: float
    city: str
    tariff: str
    sun_hours: float
    rate: float
    monthly_kwh: float
    daily_kwh: float
    size_kw: float
    panels: int
    usd_per_kw: float
    cost: int
    annual_kwh: float
    annual_savings: float
    payback_years: Optional[float] = None


class CalculatorQuoteIn(CamelModel):
    bill: float = Field(gt=0)
    city: str = "İstanbul"
    tariff: Tariff = "home"
    customer_name: str = Field(min_length=1)
    company_name: Optional[str] = None
    email: str
    phone: str
    notes: Optional[str] = None
