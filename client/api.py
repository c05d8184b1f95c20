import os, requests
from dotenv import load_dotenv
load_dotenv()
API = os.getenv("API_BASE_URL", "http://localhost:8000")
S = requests.Session(); S.headers.update({"Accept":"application/json"})

def healthz():  r=S.get(f"{API}/healthz",timeout=10); r.raise_for_status(); return r.json()
def records(table):
    r = S.get(f"{API}/api/admin/{table}", timeout=30); r.raise_for_status()
    return r.json(), r.headers.get("X-Records-Unavailable") == "true"
def record(table, rid):      r=S.get(f"{API}/api/admin/{table}/{rid}",timeout=20); r.raise_for_status(); return r.json()
def create(table, body):     r=S.post(f"{API}/api/admin/{table}",json=body,timeout=30); r.raise_for_status(); return r.json()["row"]
def update(table, rid, body):r=S.patch(f"{API}/api/admin/{table}/{rid}",json=body,timeout=30); r.raise_for_status(); return r.json()["row"]
def delete(table, rid):      r=S.delete(f"{API}/api/admin/{table}/{rid}",timeout=30); r.raise_for_status(); return r.json()["row"]
def blog(slug, group="blog"):r=S.get(f"{API}/api/{group}/{slug}",timeout=20); r.raise_for_status(); return r.json()

def upload(files):
    """files: list of (filename, bytes, content_type). Uploaded one request per file, in order."""
    urls = []
    for name, data, ctype in files:
        r = S.post(f"{API}/api/uploads", files={"file": (name, data, ctype)}, timeout=300)
        r.raise_for_status()
        urls.append(r.json()["url"])
    return urls

def error_text(e: Exception) -> str:
    """Server `detail` for HTTP errors, else the exception text."""
    if isinstance(e, requests.HTTPError) and e.response is not None:
        try:
            return str(e.response.json().get("detail", e.response.text))
        except ValueError:
            return e.response.text[:400]
    return str(e)
