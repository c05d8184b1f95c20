from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .db import Base, make_engine, make_session_factory
from .errors import RecordError
from .routers.admin import router as admin_router
from .routers.blog import router as blog_router
from .routers.uploads import router as uploads_router
from .routers.contact import router as contact_router
from app.settings import DATABASE_URL
from app.setup_logging import setup_logging
from app.storage import BlobStore

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging() # Init Logging
log = logging.getLogger(__name__)

# --------------------------------------------------------------------
# FastAPI application with lifespan hook
# --------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context runs once at startup and once at shutdown.
    The datastore engine and the blob store client are built here and
    handed to requests through app.state, then released on shutdown.
    """
    engine = make_engine(DATABASE_URL)
    # Create database tables if they don’t exist.
    Base.metadata.create_all(bind=engine)
    app.state.session_factory = make_session_factory(engine)
    app.state.blob_store = BlobStore.from_settings()
    log.info("startup complete: db=%s uploads=%s", engine.url.drivername, app.state.blob_store is not None)

    # Hand control back to FastAPI to serve requests
    yield

    engine.dispose()

# Create the FastAPI app instance
app = FastAPI(title="Agency Content API", lifespan=lifespan)

# --------------------------------------------------------------------
# Error mapping: record-layer errors -> HTTP status
# --------------------------------------------------------------------
@app.exception_handler(RecordError)
async def handle_record_error(request: Request, exc: RecordError):
    return JSONResponse({"detail": exc.message}, status_code=exc.status_code)

# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/healthz")
def health():
    """
    Simple health probe for monitoring.
    Returns:
      - ok: static True if the app is alive
      - uploads: True when a blob store is configured
    """
    return {
        "ok": True,
        "service": "agency-content",
        "version": 1,
        "uploads": getattr(app.state, "blob_store", None) is not None,
    }

# Register API routers:
app.include_router(admin_router)
app.include_router(blog_router)
app.include_router(uploads_router)
app.include_router(contact_router)
