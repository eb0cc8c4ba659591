import re

import pytest

from vural_api.utils.stock import INSTOCK, LOWSTOCK, OUTSTOCK, stock_status
from vural_api.utils.text import (
    generate_product_seo,
    is_valid_email,
    is_valid_number,
    is_valid_phone,
    sanitize_text,
    slugify,
)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Güneş Paneli", "gunes-paneli"),
        ("İNVERTÖR & Şarj", "invertor-sarj"),
        ("  --Çok   Boşluk--  ", "cok-bosluk"),
        ("Işık Ğ Ü Ö", "isik-g-u-o"),
        ("!!!", ""),
    ],
)
def test_slugify(text, expected):
    assert slugify(text) == expected


def test_slug_alphabet():
    for text in ["Hibrit İnvertör 5kW", "a__b", "Çatı/GES #1", "ÇĞİÖŞÜ çğıöşü"]:
        slug = slugify(text)
        assert re.fullmatch(r"[a-z0-9]+(-[a-z0-9]+)*", slug)


def test_stock_status_partition():
    for stock in range(-5, 0):
        assert stock_status(stock) == OUTSTOCK
    assert stock_status(0) == OUTSTOCK
    for stock in range(1, 10):
        assert stock_status(stock) == LOWSTOCK
    for stock in (10, 11, 500):
        assert stock_status(stock) == INSTOCK


def test_sanitize_text():
    assert sanitize_text('  <a href="x">hi</a> ') == "&lt;a href=&quot;x&quot;&gt;hi&lt;/a&gt;"
    assert sanitize_text(None) is None


def test_validators():
    assert is_valid_email("info@vuralenerji.com")
    assert not is_valid_email("info@vuralenerji")
    assert is_valid_phone("+90 555 123 4567")
    assert is_valid_phone("0532 111 22 33")
    assert not is_valid_phone("555-1234")
    assert is_valid_number("12.5", 0, 100)
    assert not is_valid_number("abc")
    assert not is_valid_number(-1)


def test_product_seo():
    seo = generate_product_seo("Hibrit İnvertör 5kW", "x" * 200, "inverter", "Vural", ["", "/img.jpg"])
    assert seo["title"] == "Hibrit İnvertör 5kW - Vural Enerji"
    assert seo["description"] == "x" * 155 + "..."
    assert seo["slug"] == "hibrit-invertor-5kw"
    assert seo["ogImage"] == "/img.jpg"
    assert "inverter" in seo["keywords"] and "Vural" in seo["keywords"]
