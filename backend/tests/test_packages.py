def _package(**overrides):
    body = {
        "name": "İşyeri 3000 TL Paketi",
        "minBill": 2500,
        "maxBill": 3500,
        "systemPower": "12 kW",
        "installationCost": 20000,
        "products": [
            {"productId": "prd-1", "quantity": 20},
            {"productId": "prd-3", "quantity": 2, "unitPrice": 11000},
        ],
    }
    body.update(overrides)
    return body


def test_sample_package_seeded(client):
    pkgs = client.get("/api/solar-packages").json()
    assert [p["id"] for p in pkgs] == ["pkg-sample-1000"]
    sample = client.get("/api/solar-packages/pkg-sample-1000").json()
    assert sample["totalPrice"] == 85000
    assert len(sample["products"]) == 3
    assert sample["panelCount"] == 10


def test_create_package_snapshots_lines_and_totals(client, admin_headers):
    res = client.post("/api/solar-packages", json=_package(), headers=admin_headers)
    assert res.status_code == 201, res.text
    pkg = res.json()

    lines = {line["productId"]: line for line in pkg["products"]}
    assert lines["prd-1"]["productName"] == "Monokristal Solar Panel 450W"
    assert lines["prd-1"]["unitPrice"] == 4250
    assert lines["prd-3"]["unitPrice"] == 11000  # explicit price wins
    assert pkg["totalPrice"] == 20 * 4250 + 2 * 11000 + 20000
    assert pkg["panelCount"] == 20


def test_lines_do_not_follow_catalog_price(client, admin_headers):
    pid = client.post("/api/solar-packages", json=_package(), headers=admin_headers).json()["id"]
    client.put("/api/products/prd-1", json={"price": 9999}, headers=admin_headers)
    pkg = client.get(f"/api/solar-packages/{pid}").json()
    line = next(x for x in pkg["products"] if x["productId"] == "prd-1")
    assert line["unitPrice"] == 4250


def test_unknown_product_rejected(client, admin_headers):
    body = _package(products=[{"productId": "nope", "quantity": 1}])
    assert client.post("/api/solar-packages", json=body, headers=admin_headers).status_code == 400


def test_bill_range_validated(client, admin_headers):
    body = _package(minBill=4000, maxBill=1000)
    assert client.post("/api/solar-packages", json=body, headers=admin_headers).status_code == 422


def test_list_ordered_by_min_bill_and_status_filter(client, admin_headers):
    client.post("/api/solar-packages", json=_package(minBill=100, maxBill=700), headers=admin_headers)
    client.post("/api/solar-packages", json=_package(status="inactive"), headers=admin_headers)

    bills = [p["minBill"] for p in client.get("/api/solar-packages").json()]
    assert bills == sorted(bills)
    active = client.get("/api/solar-packages", params={"status": "active"}).json()
    assert all(p["status"] == "active" for p in active)
    assert len(active) == 2


def test_recommend(client, admin_headers):
    assert client.get("/api/solar-packages/recommend/1000").json()["id"] == "pkg-sample-1000"
    assert client.get("/api/solar-packages/recommend/50000").status_code == 404

    pid = client.post(
        "/api/solar-packages", json=_package(minBill=1000, maxBill=1100), headers=admin_headers
    ).json()["id"]
    # both ranges contain 1050; the one whose midpoint is closer wins
    assert client.get("/api/solar-packages/recommend/1050").json()["id"] == pid
    assert client.get("/api/solar-packages/recommend/900").json()["id"] == "pkg-sample-1000"


def test_update_replaces_lines(client, admin_headers):
    res = client.put(
        "/api/solar-packages/pkg-sample-1000",
        json={"products": [{"productId": "prd-2", "quantity": 12}]},
        headers=admin_headers,
    )
    assert res.status_code == 200
    pkg = res.json()
    assert [x["productId"] for x in pkg["products"]] == ["prd-2"]
    assert pkg["totalPrice"] == 12 * 3100 + 10000
    assert pkg["panelCount"] == 12


def test_package_writes_need_admin(client, user_headers):
    assert client.post("/api/solar-packages", json=_package(), headers=user_headers).status_code == 403
    assert client.delete("/api/solar-packages/pkg-sample-1000").status_code == 401


def test_delete_package(client, admin_headers):
    assert client.delete("/api/solar-packages/pkg-sample-1000", headers=admin_headers).status_code == 200
    assert client.get("/api/solar-packages/pkg-sample-1000").status_code == 404
