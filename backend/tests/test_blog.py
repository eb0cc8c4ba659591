def _post(**overrides):
    body = {
        "title": "Çatı GES Kurulumu Nasıl Yapılır?",
        "excerpt": "Adım adım kurulum.",
        "content": "İçerik",
        "author": "Teknik Ekip",
        "tags": ["Kurulum"],
    }
    body.update(overrides)
    return body


def test_list_and_get_by_slug(client):
    posts = client.get("/api/blog").json()
    assert len(posts) == 2
    res = client.get("/api/blog/gunes-enerjisi-tasarruf-yollari")
    assert res.status_code == 200
    post = res.json()
    assert post["id"] == "blog-1"
    assert [c["id"] for c in post["comments"]] == ["c1", "c2"]


def test_slug_generated_and_made_unique(client, admin_headers):
    first = client.post("/api/blog", json=_post(), headers=admin_headers)
    second = client.post("/api/blog", json=_post(), headers=admin_headers)
    assert first.status_code == 201
    assert first.json()["slug"] == "cati-ges-kurulumu-nasil-yapilir"
    assert second.json()["slug"] == "cati-ges-kurulumu-nasil-yapilir-2"
    assert first.json()["likes"] == 0


def test_post_add_update_delete_identity(client, admin_headers):
    before = client.get("/api/blog").json()
    pid = client.post("/api/blog", json=_post(), headers=admin_headers).json()["id"]
    res = client.put(f"/api/blog/{pid}", json={"excerpt": "Yeni özet"}, headers=admin_headers)
    assert res.json()["excerpt"] == "Yeni özet"
    assert client.delete(f"/api/blog/{pid}", headers=admin_headers).status_code == 200
    assert client.get("/api/blog").json() == before


def test_comment_requires_login(client):
    res = client.post("/api/blog/blog-2/comments", json={"content": "Merhaba"})
    assert res.status_code == 401


def test_comment_uses_session_user_and_is_escaped(client, user_headers):
    res = client.post(
        "/api/blog/blog-2/comments",
        json={"content": "<script>alert(1)</script> Harika"},
        headers=user_headers,
    )
    assert res.status_code == 201, res.text
    c = res.json()
    assert c["userName"] == "Ahmet Yılmaz"
    assert "<script>" not in c["content"]
    assert "&lt;script&gt;" in c["content"]

    post = client.get("/api/blog/blog-2").json()
    assert len(post["comments"]) == 1


def test_comment_delete_author_or_admin(client, user_headers, admin_headers):
    # c2 belongs to another user
    res = client.delete("/api/blog/blog-1/comments/c2", headers=user_headers)
    assert res.status_code == 403
    # c1 is Ahmet's own
    assert client.delete("/api/blog/blog-1/comments/c1", headers=user_headers).status_code == 200
    assert client.delete("/api/blog/blog-1/comments/c2", headers=admin_headers).status_code == 200
    assert client.get("/api/blog/blog-1").json()["comments"] == []


def test_like_increments(client):
    res = client.post("/api/blog/blog-1/like")
    assert res.json()["likes"] == 25
    res = client.post("/api/blog/gunes-enerjisi-tasarruf-yollari/like")
    assert res.json()["likes"] == 26


def test_deleting_post_removes_comments(client, admin_headers):
    from vural_api.db import SessionLocal
    from vural_api.models.blog import Comment

    client.delete("/api/blog/blog-1", headers=admin_headers)
    db = SessionLocal()
    try:
        assert db.query(Comment).filter(Comment.post_id == "blog-1").count() == 0
    finally:
        db.close()
