from app.routers import uploads


def test_single_upload(client, blob_store):
    r = client.post("/api/uploads", files={"file": ("Logo.PNG", b"\x89PNG...", "image/png")})
    assert r.status_code == 201, r.text
    out = r.json()
    assert out["path"].startswith("uploads/")
    assert out["path"].endswith(".png")
    assert out["url"] == f"https://cdn.test/{out['path']}"
    assert blob_store.objects[out["path"]] == (b"\x89PNG...", "image/png")

def test_multiple_uploads(client, blob_store):
    files = [
        ("files", ("a.jpg", b"a", "image/jpeg")),
        ("files", ("clip.mp4", b"b", "video/mp4")),
    ]
    r = client.post("/api/uploads", files=files)
    assert r.status_code == 201, r.text
    out = r.json()
    assert len(out["urls"]) == 2
    assert len(out["paths"]) == 2
    assert out["paths"][1].endswith(".mp4")

def test_upload_without_extension(client, blob_store):
    r = client.post("/api/uploads", files={"file": ("README", b"x", "text/plain")})
    assert r.json()["path"].endswith(".bin")

def test_upload_too_large(client, blob_store, monkeypatch):
    monkeypatch.setattr(uploads, "UPLOAD_MAX_BYTES", 4)
    r = client.post("/api/uploads", files={"file": ("big.png", b"123456", "image/png")})
    assert r.status_code == 413
    detail = r.json()["detail"]
    assert "big.png" in detail
    assert "4 B" in detail
    assert blob_store.objects == {}

def test_upload_no_file(client, blob_store):
    r = client.post("/api/uploads", data={"other": "x"})
    assert r.status_code == 400

def test_upload_not_configured(client):
    r = client.post("/api/uploads", files={"file": ("a.png", b"a", "image/png")})
    assert r.status_code == 502
    assert "not configured" in r.json()["detail"]

def test_upload_too_large_rejected_before_read(client, blob_store, monkeypatch):
    from starlette.datastructures import UploadFile

    async def no_read(self, size=-1):
        raise AssertionError("oversize upload was read into memory")

    monkeypatch.setattr(uploads, "UPLOAD_MAX_BYTES", 4)
    monkeypatch.setattr(UploadFile, "read", no_read)
    r = client.post("/api/uploads", files={"file": ("big.png", b"123456", "image/png")})
    assert r.status_code == 413
    assert "6 B" in r.json()["detail"]
    assert blob_store.objects == {}
