from sqlalchemy.exc import OperationalError


def _create(client, table="clients", **payload):
    base = {"client_name": "Acme", "logo_url": "https://x/logo.png", "blog_title": "Hello World"}
    base.update(payload)
    return client.post(f"/api/admin/{table}", json=base)


def test_create_then_read(client):
    r = _create(client)
    assert r.status_code == 201, r.text
    out = r.json()
    assert out["success"] is True
    row = out["row"]
    assert row["blogSlug"] == "hello-world"
    assert row["blogFeatureImage"] is None
    assert row["images"] == []

    r2 = client.get(f"/api/admin/clients/{row['id']}")
    assert r2.status_code == 200
    assert r2.json() == row

def test_create_validation_error(client):
    r = client.post("/api/admin/clients", json={"client_name": "Acme", "blog_title": "T"})
    assert r.status_code == 400
    assert set(r.json()) == {"detail"}
    assert "logo_url" in r.json()["detail"]

def test_unknown_table(client):
    r = client.get("/api/admin/secrets")
    assert r.status_code == 422

def test_list_clients(client, seed_sample):
    r = client.get("/api/admin/clients")
    assert r.status_code == 200
    assert "X-Records-Unavailable" not in r.headers
    data = r.json()
    assert [d["id"] for d in data] == ["c-globex", "c-acme"]
    assert data[1]["blogFeatureImage"] == "https://x/1.png"

def test_list_clients_blog2(client, seed_sample):
    r = client.get("/api/admin/clients_blog2")
    assert r.status_code == 200
    data = r.json()
    assert len(data) == 1
    assert data[0]["blog2FeatureImage"] == "https://x/b2.png"

def test_list_marks_unavailable(client, db_session, monkeypatch):
    def boom(*a, **k):
        raise OperationalError("SELECT", {}, Exception("down"))
    monkeypatch.setattr(db_session, "execute", boom)
    r = client.get("/api/admin/clients")
    assert r.status_code == 200
    assert r.json() == []
    assert r.headers["X-Records-Unavailable"] == "true"

def test_patch_clears_videos(client):
    row = _create(client, videos=["v1", "v2", "v3"]).json()["row"]
    assert len(row["videos"]) == 3
    r = client.patch(f"/api/admin/clients/{row['id']}", json={"videos": []})
    assert r.status_code == 200, r.text
    assert r.json()["row"]["videos"] == []
    assert client.get(f"/api/admin/clients/{row['id']}").json()["videos"] == []

def test_patch_accepts_string_media(client):
    row = _create(client).json()["row"]
    r = client.patch(f"/api/admin/clients/{row['id']}", json={"images": "a.png, b.png"})
    assert r.json()["row"]["images"] == ["a.png", "b.png"]
    assert r.json()["row"]["blogFeatureImage"] == "a.png"

def test_patch_no_fields(client):
    row = _create(client).json()["row"]
    r = client.patch(f"/api/admin/clients/{row['id']}", json={"something": 1})
    assert r.status_code == 400
    assert r.json()["detail"] == "No updatable fields provided"

def test_patch_non_string_field(client):
    row = _create(client).json()["row"]
    r = client.patch(f"/api/admin/clients/{row['id']}", json={"logo_url": ["https://x/a.png"]})
    assert r.status_code == 400
    assert "logo_url" in r.json()["detail"]

def test_create_non_string_title(client):
    r = _create(client, blog_title=["Hello"])
    assert r.status_code == 400
    assert r.json() == {"detail": "Fields must be strings: blog_title"}

def test_patch_missing(client):
    r = client.patch("/api/admin/clients/nope", json={"client_name": "x"})
    assert r.status_code == 404

def test_delete(client):
    row = _create(client).json()["row"]
    r = client.delete(f"/api/admin/clients/{row['id']}")
    assert r.status_code == 200
    assert r.json()["row"]["id"] == row["id"]
    assert client.get(f"/api/admin/clients/{row['id']}").status_code == 404
    assert client.delete(f"/api/admin/clients/{row['id']}").status_code == 404

def test_create_upstream_error(client, db_session, monkeypatch):
    def boom(*a, **k):
        raise OperationalError("INSERT", {}, Exception("disk full"))
    monkeypatch.setattr(db_session, "commit", boom)
    r = _create(client)
    assert r.status_code == 502
    assert "disk full" in r.json()["detail"]

def test_healthz(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["ok"] is True
