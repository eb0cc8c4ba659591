def test_health_ok(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["db"] is True
    assert "storage_mirror" in body


def test_everything_lives_under_one_base_path(client):
    # the old split between localhost:3001 and /api is gone
    assert client.get("/health").status_code == 404
    assert client.get("/api/products").status_code == 200
