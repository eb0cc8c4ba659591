import json
import os

QUOTE = {
    "customerName": "Veli Can",
    "email": "veli@example.com",
    "phone": "0532 123 45 67",
    "productName": "Hibrit İnvertör 5kW",
    "productSku": "INV-5KW-HB",
    "message": "Fiyat alabilir miyim?",
}


def test_public_quote_is_new_and_dated_today(client, admin_headers):
    res = client.post("/api/quotes", json=QUOTE)
    assert res.status_code == 201, res.text
    qid = res.json()["id"]

    quotes = client.get("/api/quotes", headers=admin_headers).json()
    q = next(x for x in quotes if x["id"] == qid)
    assert q["status"] == "new"
    assert q["customerName"] == "Veli Can"


def test_quote_defaults_to_general_request(client, admin_headers):
    body = {k: v for k, v in QUOTE.items() if k not in ("productName", "productSku")}
    qid = client.post("/api/quotes", json=body).json()["id"]
    q = next(x for x in client.get("/api/quotes", headers=admin_headers).json() if x["id"] == qid)
    assert q["productName"] == "Genel Teklif"
    assert q["productSku"] == "-"


def test_quote_rejects_bad_contact_details(client):
    assert client.post("/api/quotes", json={**QUOTE, "email": "not-an-email"}).status_code == 400
    assert client.post("/api/quotes", json={**QUOTE, "phone": "12"}).status_code == 400


def test_quote_status_change_and_delete(client, admin_headers):
    res = client.put("/api/quotes/qt-101/status", json={"status": "offered"}, headers=admin_headers)
    assert res.status_code == 200
    assert res.json()["status"] == "offered"

    bad = client.put("/api/quotes/qt-101/status", json={"status": "shipped"}, headers=admin_headers)
    assert bad.status_code == 422

    assert client.delete("/api/quotes/qt-101", headers=admin_headers).status_code == 200
    assert client.delete("/api/quotes/qt-101", headers=admin_headers).status_code == 404


def test_quotes_list_is_admin_only(client, user_headers):
    assert client.get("/api/quotes").status_code == 401
    assert client.get("/api/quotes", headers=user_headers).status_code == 403


def test_contact_message_is_mirrored(client, admin_headers, storage_dir):
    res = client.post(
        "/api/messages",
        json={"name": "Ali", "email": "ali@example.com", "subject": "Bilgi", "message": "<b>Merhaba</b>"},
    )
    assert res.status_code == 201
    assert res.json()["message"] == "Mesajınız başarıyla gönderildi."

    msgs = client.get("/api/messages", headers=admin_headers).json()
    assert msgs[0]["message"] == "&lt;b&gt;Merhaba&lt;/b&gt;"

    with open(os.path.join(storage_dir, "vural_contact_messages.json"), encoding="utf-8") as f:
        mirrored = json.load(f)
    assert mirrored == msgs


def test_message_status_cycle(client, admin_headers):
    mid = client.post(
        "/api/messages", json={"name": "Ali", "email": "ali@example.com", "message": "Selam"}
    ).json()["id"]
    for status in ("read", "replied", "new"):
        res = client.put(f"/api/messages/{mid}/status", json={"status": status}, headers=admin_headers)
        assert res.json()["status"] == status


def test_job_application_flow(client, admin_headers):
    res = client.post(
        "/api/applications",
        json={
            "fullName": "Deniz Ak",
            "email": "deniz@example.com",
            "phone": "+905551234567",
            "position": "Saha Mühendisi",
            "coverLetter": "Başvurmak istiyorum.",
        },
    )
    assert res.status_code == 201
    aid = res.json()["id"]

    res = client.put(f"/api/applications/{aid}/status", json={"status": "interview"}, headers=admin_headers)
    assert res.json()["status"] == "interview"

    apps = client.get("/api/applications", headers=admin_headers).json()
    assert {a["id"] for a in apps} >= {"job-1", aid}

    assert client.delete(f"/api/applications/{aid}", headers=admin_headers).status_code == 200


def test_newsletter(client):
    ok = client.post("/api/newsletter", json={"email": "okur@example.com"})
    assert ok.status_code == 200
    assert ok.json()["success"] is True
    assert client.post("/api/newsletter", json={"email": "nope"}).status_code == 400
