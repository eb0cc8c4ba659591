from vural_api.db import SessionLocal
from vural_api.models.customer import Customer
from vural_api.models.revoked_token import RevokedToken
from vural_api.services.auth_service import AuthService


def test_login_returns_token_and_user(client):
    res = client.post("/api/auth/login", json={"email": "admin@vuralenerji.com", "password": "admin"})
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["tokenType"] == "bearer"
    assert body["user"]["role"] == "admin"
    assert "password" not in body["user"] and "passwordHash" not in body["user"]


def test_wrong_password_rejected(client):
    res = client.post("/api/auth/login", json={"email": "admin@vuralenerji.com", "password": "nope"})
    assert res.status_code == 401
    assert res.json()["detail"] == "Geçersiz e-posta veya şifre."


def test_no_bypass_credential(client):
    for email, password in [("admin", "admin"), ("esyonel@gmail.com", "45184518")]:
        res = client.post("/api/auth/login", json={"email": email, "password": password})
        assert res.status_code == 401


def test_passwords_are_stored_hashed(client):
    db = SessionLocal()
    try:
        admin = db.query(Customer).filter(Customer.email == "admin@vuralenerji.com").one()
        assert admin.password_hash != "admin"
        assert ":" in admin.password_hash  # werkzeug "method:salt$hash" format
    finally:
        db.close()


def test_register_logs_in(client):
    res = client.post(
        "/api/auth/register",
        json={"name": "Ayşe Demir", "email": "ayse@example.com", "password": "secret1"},
    )
    assert res.status_code == 201, res.text
    body = res.json()
    assert body["user"]["role"] == "user"
    assert body["user"]["status"] == "active"
    assert "dicebear" in body["user"]["avatar"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {body['token']}"})
    assert me.json()["email"] == "ayse@example.com"


def test_register_duplicate_email(client):
    res = client.post(
        "/api/auth/register",
        json={"name": "Ahmet", "email": "AHMET@gmail.com", "password": "secret1"},
    )
    assert res.status_code == 409
    assert res.json()["detail"] == "Bu e-posta adresi zaten kayıtlı."


def test_register_respects_allow_registration(client, admin_headers):
    client.put("/api/settings", json={"allowRegistration": False}, headers=admin_headers)
    res = client.post(
        "/api/auth/register",
        json={"name": "Late", "email": "late@example.com", "password": "secret1"},
    )
    assert res.status_code == 403


def test_logout_revokes_token(client, user_headers):
    assert client.get("/api/auth/me", headers=user_headers).status_code == 200
    assert client.post("/api/auth/logout", headers=user_headers).status_code == 200
    assert client.get("/api/auth/me", headers=user_headers).status_code == 401


def test_tampered_token_rejected(client, user_headers):
    token = user_headers["Authorization"].split()[1]
    header_and_claims = token.rsplit(".", 1)[0]
    bad = {"Authorization": f"Bearer {header_and_claims}.Zm9yZ2Vk"}
    assert client.get("/api/auth/me", headers=bad).status_code == 401


def test_update_own_profile(client, user_headers):
    res = client.patch("/api/auth/me", json={"phone": "+905551112233", "password": "newpass"}, headers=user_headers)
    assert res.status_code == 200
    assert res.json()["phone"] == "+905551112233"

    old = client.post("/api/auth/login", json={"email": "ahmet@gmail.com", "password": "user"})
    new = client.post("/api/auth/login", json={"email": "ahmet@gmail.com", "password": "newpass"})
    assert old.status_code == 401
    assert new.status_code == 200


def test_inactive_account_cannot_log_in(client, admin_headers):
    users = client.get("/api/customers", headers=admin_headers).json()
    ahmet = next(u for u in users if u["email"] == "ahmet@gmail.com")
    client.put(f"/api/customers/{ahmet['id']}", json={"status": "inactive"}, headers=admin_headers)

    res = client.post("/api/auth/login", json={"email": "ahmet@gmail.com", "password": "user"})
    assert res.status_code == 403


def test_purge_removes_only_expired_revocations(client, user_headers):
    client.post("/api/auth/logout", headers=user_headers)
    db = SessionLocal()
    try:
        assert AuthService(db).purge_revoked() == 0
        assert db.query(RevokedToken).count() == 1
    finally:
        db.close()


def test_customer_admin_crud(client, admin_headers, user_headers):
    assert client.get("/api/customers", headers=user_headers).status_code == 403

    res = client.post(
        "/api/customers",
        json={"name": "Yeni Admin", "email": "yeni@vuralenerji.com", "password": "pass1234", "role": "admin"},
        headers=admin_headers,
    )
    assert res.status_code == 201
    cid = res.json()["id"]

    dup = client.post(
        "/api/customers",
        json={"name": "X", "email": "yeni@vuralenerji.com", "password": "pass1234"},
        headers=admin_headers,
    )
    assert dup.status_code == 409

    assert client.delete(f"/api/customers/{cid}", headers=admin_headers).status_code == 200
    emails = [c["email"] for c in client.get("/api/customers", headers=admin_headers).json()]
    assert "yeni@vuralenerji.com" not in emails
