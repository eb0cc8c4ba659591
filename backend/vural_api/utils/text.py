import re
from html import escape
from typing import Iterable, Optional
from uuid import uuid4

TURKISH_MAP = str.maketrans(
    {
        "ç": "c", "Ç": "c",
        "ğ": "g", "Ğ": "g",
        "ı": "i", "İ": "i",
        "ö": "o", "Ö": "o",
        "ş": "s", "Ş": "s",
        "ü": "u", "Ü": "u",
    }
)

_NON_SLUG = re.compile(r"[^a-z0-9]+")
_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PHONE = re.compile(r"^\+?[0-9]{10,12}$")


def slugify(text: str) -> str:
    """
    URL slug with Turkish transliteration.

    >>> slugify("Güneş Paneli")
    'gunes-paneli'
    """
    if not text:
        return ""
    # translate before lower(): "İ".lower() yields "i" plus a combining dot
    ascii_text = text.translate(TURKISH_MAP).lower()
    return _NON_SLUG.sub("-", ascii_text).strip("-")


def new_id(prefix: str = "") -> str:
    return f"{prefix}{uuid4().hex[:9]}"


def sanitize_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return escape(value.strip(), quote=True)


def is_valid_email(email: Optional[str]) -> bool:
    return bool(email) and bool(_EMAIL.match(email))


def is_valid_phone(phone: Optional[str]) -> bool:
    if not phone:
        return False
    return bool(_PHONE.match(re.sub(r"\s", "", phone)))


def is_valid_number(value, minimum: float = 0, maximum: float = float("inf")) -> bool:
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return False
    return minimum <= parsed <= maximum


def generate_product_seo(
    name: str,
    description: Optional[str] = None,
    category: Optional[str] = None,
    brand: Optional[str] = None,
    images: Iterable[str] = (),
) -> dict:
    title = f"{name} - Vural Enerji"
    if description:
        meta = f"{description[:155]}..."
    else:
        meta = f"{name} ürününü Vural Enerji'den satın alın. Kaliteli güneş enerjisi çözümleri."
    keywords = ", ".join(
        k for k in [name, category, "güneş enerjisi", "solar panel", "yenilenebilir enerji", brand] if k
    )
    images = [i for i in images if i]
    return {
        "title": title,
        "description": meta,
        "keywords": keywords,
        "slug": slugify(name),
        "ogTitle": title,
        "ogDescription": meta,
        "ogImage": images[0] if images else "/default-product.jpg",
    }
