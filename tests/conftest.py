# tests/conftest.py
import os
import tempfile
import pytest

# Keep the app's own lifespan engine off the working directory
os.environ.setdefault("DATABASE_URL", "sqlite://")

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

from app.main import app
from app.db import Base, get_db
from app.models import Client, ClientBlog2
from app.storage import get_blob_store, object_key


# --- Temporary SQLite DB file for the whole test session ---
@pytest.fixture(scope="session")
def tmp_db_url():
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    url = f"sqlite:///{path}"
    yield url
    try:
        os.remove(path)
    except OSError:
        pass


@pytest.fixture(scope="session")
def engine(tmp_db_url):
    eng = create_engine(tmp_db_url, connect_args={"check_same_thread": False}, future=True)
    Base.metadata.create_all(bind=eng)
    return eng


@pytest.fixture(scope="function")
def db_session(engine):
    TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)
    db = TestingSession()
    _clear_all(db)
    try:
        yield db
    finally:
        db.rollback()
        db.close()


# --- Override FastAPI's DB dependency to use our test session ---
@pytest.fixture(autouse=True)
def override_get_db(db_session):
    def _get_db():
        try:
            yield db_session
        finally:
            pass
    app.dependency_overrides[get_db] = _get_db
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


# --- In-memory stand-in for the S3 bucket ---
class FakeBlobStore:
    def __init__(self):
        self.objects = {}

    def store(self, data, content_type, filename=None):
        key = object_key(filename)
        self.objects[key] = (data, content_type)
        return key

    def public_url(self, key):
        return f"https://cdn.test/{key}"


@pytest.fixture
def blob_store():
    store = FakeBlobStore()
    app.dependency_overrides[get_blob_store] = lambda: store
    return store


def _clear_all(db):
    db.execute(text("DELETE FROM clients"))
    db.execute(text("DELETE FROM clients_blog2"))
    db.commit()


@pytest.fixture
def seed_sample(db_session):
    """
    Two clients rows (one carrying both content groups) and one
    clients_blog2 row, with raw-ish stored media to exercise read paths.
    """
    from datetime import datetime, timezone, timedelta

    now = datetime.now(timezone.utc)
    rows = [
        Client(
            id="c-acme", client_name="Acme", logo_url="https://x/acme.png",
            blog_title="Hello World", blog_slug="hello-world",
            blog_body_html="<p>hi</p>",
            images=["https://x/1.png", "https://x/2.png"], videos=["https://x/v.mp4"],
            blog2_title="Second Take", blog2_slug="second-take",
            created_at=now - timedelta(days=2),
        ),
        Client(
            id="c-globex", client_name="Globex", logo_url="https://x/globex.png",
            blog_title="Growth Story", blog_slug="growth-story",
            blog_feature_image="https://x/hero.png",
            images=[], videos=[], cta_text="See the results",
            created_at=now - timedelta(days=1),
        ),
        ClientBlog2(
            id="b2-initech", client_name="Initech", logo_url="https://x/initech.png",
            blog2_title="Case Study", blog2_slug="case-study",
            blog2_images=["https://x/b2.png"], blog2_videos=[],
            created_at=now,
        ),
    ]
    db_session.add_all(rows)
    db_session.commit()
