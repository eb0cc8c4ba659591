import os
import tempfile

# point the app at throwaway storage before anything imports vural_api.config
_TMP = tempfile.mkdtemp(prefix="vural-test-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_TMP, "test.db").replace("\\", "/")
os.environ["STORAGE_DIR"] = os.path.join(_TMP, "storage")
os.environ["SCHEDULER_ENABLED"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key-with-enough-length-for-hs256"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from vural_api.db import init_db
from vural_api.main import app

ADMIN_EMAIL = "admin@vuralenerji.com"
ADMIN_PASSWORD = "admin"
USER_EMAIL = "ahmet@gmail.com"
USER_PASSWORD = "user"


@pytest.fixture(autouse=True)
def fresh_db():
    # Recreate DB fresh and reseed demo data for every test
    init_db(reset=True, seed=True)
    yield


@pytest.fixture
def client():
    return TestClient(app)


def _login(client, email, password):
    res = client.post("/api/auth/login", json={"email": email, "password": password})
    assert res.status_code == 200, res.text
    return {"Authorization": f"Bearer {res.json()['token']}"}


@pytest.fixture
def admin_headers(client):
    return _login(client, ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest.fixture
def user_headers(client):
    return _login(client, USER_EMAIL, USER_PASSWORD)


@pytest.fixture
def storage_dir():
    return os.environ["STORAGE_DIR"]
