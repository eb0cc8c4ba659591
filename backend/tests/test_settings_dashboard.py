def test_settings_defaults(client, admin_headers):
    s = client.get("/api/settings", headers=admin_headers).json()
    assert s["siteName"] == "Vural Enerji"
    assert s["allowRegistration"] is True
    assert s["apiKeySet"] is False


def test_settings_merge_and_key_masking(client, admin_headers):
    res = client.put(
        "/api/settings",
        json={"maintenanceMode": True, "apiKey": "AIzaSyA-very-secret-key-1234"},
        headers=admin_headers,
    )
    assert res.status_code == 200
    s = res.json()
    assert s["maintenanceMode"] is True
    assert s["siteName"] == "Vural Enerji"
    assert s["apiKeySet"] is True
    assert s["apiKey"].startswith("AIza") and s["apiKey"].endswith("1234")
    assert "very-secret" not in s["apiKey"]


def test_settings_admin_only(client, user_headers):
    assert client.get("/api/settings", headers=user_headers).status_code == 403


def test_dashboard(client, admin_headers):
    client.post(
        "/api/quotes",
        json={
            "customerName": "Veli",
            "email": "veli@example.com",
            "phone": "05321234567",
            "message": "Teklif",
        },
    )
    res = client.get("/api/admin/dashboard", headers=admin_headers)
    assert res.status_code == 200
    data = res.json()
    counts = data["counts"]
    assert counts["products"] == 4
    assert counts["lowStock"] == 1
    assert counts["outOfStock"] == 1
    assert counts["quotes"] == 2
    assert counts["quotesByStatus"]["new"] == 2
    assert counts["newApplications"] == 1
    assert counts["totalLikes"] == 39

    assert len(data["quotesPerMonth"]) == 6
    assert data["quotesPerMonth"][-1]["count"] >= 1
    assert data["recentQuotes"][0]["customerName"] == "Veli"


def test_dashboard_admin_only(client, user_headers):
    assert client.get("/api/admin/dashboard", headers=user_headers).status_code == 403
