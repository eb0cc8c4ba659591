import json
import os

from vural_api.db import SessionLocal
from vural_api.models.product import Product


def _new_product(**overrides):
    body = {
        "name": "Test Panel 500W",
        "sku": "TEST-500",
        "category": "solar",
        "price": 5000,
        "stock": 5,
        "description": "Test",
    }
    body.update(overrides)
    return body


def test_list_products(client):
    res = client.get("/api/products")
    assert res.status_code == 200
    body = res.json()
    assert "items" in body
    assert isinstance(body["items"], list)
    skus = [it["sku"] for it in body["items"]]
    assert "SP-450-MK" in skus
    assert body["total"] == len(body["items"])


def test_filter_products_by_category(client):
    res = client.get("/api/products", params={"category": "inverter"})
    items = res.json()["items"]
    assert items and all(p["category"] == "inverter" for p in items)


def test_create_product_derives_stock_status_and_seo(client, admin_headers):
    res = client.post("/api/products", json=_new_product(), headers=admin_headers)
    assert res.status_code == 201, res.text
    p = res.json()
    assert p["stockStatus"] == "lowstock"
    assert p["slug"] == "test-panel-500w"
    assert p["seo"]["title"] == "Test Panel 500W - Vural Enerji"
    assert p["seo"]["ogImage"] == "/default-product.jpg"


def test_stock_status_follows_updates(client, admin_headers):
    pid = client.post("/api/products", json=_new_product(), headers=admin_headers).json()["id"]

    res = client.put(f"/api/products/{pid}", json={"stock": 0}, headers=admin_headers)
    assert res.json()["stockStatus"] == "outstock"

    res = client.put(f"/api/products/{pid}", json={"stock": 10}, headers=admin_headers)
    assert res.json()["stockStatus"] == "instock"


def test_duplicate_sku_conflict(client, admin_headers):
    res = client.post("/api/products", json=_new_product(sku="SP-450-MK"), headers=admin_headers)
    assert res.status_code == 409


def test_negative_price_rejected(client, admin_headers):
    res = client.post("/api/products", json=_new_product(price=-1), headers=admin_headers)
    assert res.status_code == 422


def test_product_writes_need_admin(client, user_headers):
    assert client.post("/api/products", json=_new_product()).status_code == 401
    assert client.post("/api/products", json=_new_product(), headers=user_headers).status_code == 403


def test_add_update_delete_leaves_catalog_unchanged(client, admin_headers):
    before = client.get("/api/products").json()["items"]

    pid = client.post("/api/products", json=_new_product(), headers=admin_headers).json()["id"]
    client.put(f"/api/products/{pid}", json={"price": 4200}, headers=admin_headers)
    assert client.delete(f"/api/products/{pid}", headers=admin_headers).status_code == 200

    assert client.get("/api/products").json()["items"] == before
    assert client.get(f"/api/products/{pid}").status_code == 404


def test_product_mutation_refreshes_mirror(client, admin_headers, storage_dir):
    client.post("/api/products", json=_new_product(), headers=admin_headers)
    with open(os.path.join(storage_dir, "vural_products.json"), encoding="utf-8") as f:
        mirrored = json.load(f)
    assert "TEST-500" in [p["sku"] for p in mirrored]


def test_category_slug_defaults_to_name(client, admin_headers):
    res = client.post("/api/categories", json={"name": "Şarj İstasyonları"}, headers=admin_headers)
    assert res.status_code == 201
    assert res.json()["slug"] == "sarj-istasyonlari"


def test_duplicate_category_slug_conflict(client, admin_headers):
    res = client.post("/api/categories", json={"name": "Solar", "slug": "solar"}, headers=admin_headers)
    assert res.status_code == 409
    assert "slug" in res.json()["detail"]


def test_category_rename_cascades_to_products(client, admin_headers):
    cats = client.get("/api/categories").json()
    solar = next(c for c in cats if c["slug"] == "solar")

    res = client.put(
        f"/api/categories/{solar['id']}",
        json={"name": "Güneş Panelleri", "slug": "gunes-panelleri"},
        headers=admin_headers,
    )
    assert res.status_code == 200
    assert res.json()["slug"] == "gunes-panelleri"

    db = SessionLocal()
    try:
        assert db.query(Product).filter(Product.category == "solar").count() == 0
        assert db.query(Product).filter(Product.category == "gunes-panelleri").count() == 2
    finally:
        db.close()


def test_every_product_points_at_an_existing_category(client, admin_headers):
    cats = client.get("/api/categories").json()
    inverter = next(c for c in cats if c["slug"] == "inverter")
    client.put(f"/api/categories/{inverter['id']}", json={"slug": "inverters"}, headers=admin_headers)

    slugs = {c["slug"] for c in client.get("/api/categories").json()}
    products = client.get("/api/products").json()["items"]
    assert all(p["category"] in slugs for p in products)


def test_delete_category_in_use_conflict(client, admin_headers):
    cats = client.get("/api/categories").json()
    solar = next(c for c in cats if c["slug"] == "solar")
    other = next(c for c in cats if c["slug"] == "other")

    assert client.delete(f"/api/categories/{solar['id']}", headers=admin_headers).status_code == 409
    assert client.delete(f"/api/categories/{other['id']}", headers=admin_headers).status_code == 200


def test_list_categories(client):
    res = client.get("/api/categories")
    assert res.status_code == 200
    cats = res.json()
    assert {c["slug"] for c in cats} == {"solar", "inverter", "battery", "cable", "electronics", "other"}
    assert cats[0]["name"] == "Batarya Sistemleri"


def test_products_total_counts_every_row(client):
    body = client.get("/api/products").json()
    assert body["total"] == 4

    page = client.get("/api/products", params={"size": 2}).json()
    assert len(page["items"]) == 2
    assert page["total"] == 4


def test_category_name_change_rederives_slug(client, admin_headers):
    res = client.put("/api/categories/cat-3", json={"name": "Lityum Aküler"}, headers=admin_headers)
    assert res.status_code == 200
    assert res.json()["slug"] == "lityum-akuler"

    assert client.get("/api/products/prd-4").json()["category"] == "lityum-akuler"
    assert client.get("/api/products", params={"category": "battery"}).json()["total"] == 0
