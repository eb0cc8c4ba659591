"""
Rough rooftop solar sizing from a monthly electricity bill.

All constants are hardcoded approximations for Turkish conditions; the
numbers are meant for a first conversation with a customer, not for an
engineering offer.
"""
import math
from typing import Optional

from vural_api.services.errors import InvalidInput
from vural_api.utils.text import is_valid_number, slugify

# average peak sun hours per day
SUN_HOURS = {
    "İstanbul": 3.8,
    "Ankara": 4.5,
    "İzmir": 4.9,
    "Antalya": 5.3,
    "Adana": 5.1,
    "Osmaniye": 5.0,
    "Gaziantep": 5.0,
    "Konya": 5.0,
    "Bursa": 4.0,
    "Trabzon": 3.3,
}
DEFAULT_SUN_HOURS = 4.5
_SUN_HOURS_BY_SLUG = {slugify(city): hours for city, hours in SUN_HOURS.items()}

# TL per kWh
TARIFFS = {"home": 2.8, "business": 3.6}

# (upper bound in kW, USD per kW)
PRICE_TIERS = [(5, 1000), (10, 900), (50, 800)]
LARGE_SYSTEM_USD_PER_KW = 700

USD_TRY = 32.0
PERFORMANCE_RATIO = 0.8
PANEL_WATTS = 550
DAYS_PER_MONTH = 30


def sun_hours_for(city: Optional[str]) -> float:
    return _SUN_HOURS_BY_SLUG.get(slugify(city or ""), DEFAULT_SUN_HOURS)


def usd_per_kw(size_kw: float) -> int:
    for limit, price in PRICE_TIERS:
        if size_kw <= limit:
            return price
    return LARGE_SYSTEM_USD_PER_KW


def _ceil(x: float) -> int:
    # rounding first keeps float noise such as 59.0000000001 from bumping a step
    return math.ceil(round(x, 6))


def estimate(bill: float, city: str = "İstanbul", tariff: str = "home") -> dict:
    if not is_valid_number(bill) or float(bill) <= 0:
        raise InvalidInput("Bill must be greater than zero")
    if tariff not in TARIFFS:
        raise InvalidInput(f"Unknown tariff: {tariff}")

    rate = TARIFFS[tariff]
    sun = sun_hours_for(city)
    monthly_kwh = bill / rate
    daily_kwh = monthly_kwh / DAYS_PER_MONTH
    size_kw = _ceil(daily_kwh / (sun * PERFORMANCE_RATIO) * 10) / 10
    panels = _ceil(size_kw * 1000 / PANEL_WATTS)
    price = usd_per_kw(size_kw)
    cost = round(size_kw * price * USD_TRY)
    annual_kwh = size_kw * sun * PERFORMANCE_RATIO * 365
    annual_savings = annual_kwh * rate
    payback = round(cost / annual_savings, 1) if annual_savings > 0 else None

    return {
        "bill": bill,
        "city": city,
        "tariff": tariff,
        "sun_hours": sun,
        "rate": rate,
        "monthly_kwh": round(monthly_kwh, 2),
        "daily_kwh": round(daily_kwh, 3),
        "size_kw": size_kw,
        "panels": panels,
        "usd_per_kw": price,
        "cost": cost,
        "annual_kwh": round(annual_kwh, 1),
        "annual_savings": round(annual_savings, 2),
        "payback_years": payback,
    }


def list_cities() -> list:
    return [{"city": c, "sunHours": h} for c, h in sorted(SUN_HOURS.items())]
