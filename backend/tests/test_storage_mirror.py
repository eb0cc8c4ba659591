import pytest

from vural_api.adapters.storage_mirror import PRODUCTS, SETTINGS, StorageMirror, StorageQuotaExceeded


def test_read_returns_what_was_written(tmp_path):
    mirror = StorageMirror(str(tmp_path))
    value = [{"id": "prd-1", "name": "Güneş Paneli", "price": 4250.5, "specs": ["A", "B"], "isNew": True}]
    mirror.write(PRODUCTS, value)
    assert mirror.read(PRODUCTS) == value


def test_missing_key_reads_none(tmp_path):
    assert StorageMirror(str(tmp_path)).read(SETTINGS) is None


def test_quota_exceeded(tmp_path):
    mirror = StorageMirror(str(tmp_path), quota_bytes=64)
    with pytest.raises(StorageQuotaExceeded):
        mirror.write(PRODUCTS, ["x" * 100])
    # the failed write leaves nothing behind
    assert mirror.read(PRODUCTS) is None


def test_safe_write_swallows_quota_errors(tmp_path):
    mirror = StorageMirror(str(tmp_path), quota_bytes=64)
    mirror.write(PRODUCTS, [1, 2, 3])
    assert mirror.safe_write(PRODUCTS, ["x" * 100]) is False
    assert mirror.read(PRODUCTS) == [1, 2, 3]


def test_disabled_mirror_writes_nothing(tmp_path):
    mirror = StorageMirror(str(tmp_path), enabled=False)
    assert mirror.write(PRODUCTS, [1]) == 0
    assert mirror.read(PRODUCTS) is None


def test_key_must_be_plain(tmp_path):
    with pytest.raises(ValueError):
        StorageMirror(str(tmp_path)).write("../etc/passwd", {})


def test_storage_endpoint(client, admin_headers, user_headers):
    client.put("/api/settings", json={"siteName": "Vural Enerji A.Ş."}, headers=admin_headers)
    res = client.get("/api/storage/vural_settings", headers=admin_headers)
    assert res.status_code == 200
    assert res.json()["value"]["siteName"] == "Vural Enerji A.Ş."

    assert client.get("/api/storage/vural_settings", headers=user_headers).status_code == 403
    assert client.get("/api/storage/unknown_key", headers=admin_headers).status_code == 404
