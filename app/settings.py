# app/settings.py
import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Datastore
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{PROJECT_ROOT / 'agency.sqlite3'}")

# Uploads: byte ceiling per file, configured in megabytes
UPLOAD_MAX_MB = int(os.getenv("UPLOAD_MAX_MB", "8") or 8)
UPLOAD_MAX_BYTES = UPLOAD_MAX_MB * 1024 * 1024
UPLOAD_FOLDER = "uploads"

# S3-compatible object storage (AWS, Linode, Supabase S3 gateway, ...)
S3_BUCKET = os.getenv("S3_BUCKET", "")
S3_REGION = os.getenv("S3_REGION", "")
S3_ENDPOINT = os.getenv("S3_ENDPOINT", "")  # empty -> AWS default endpoint
S3_ACCESS_KEY = os.getenv("S3_ACCESS_KEY", "")
S3_SECRET_KEY = os.getenv("S3_SECRET_KEY", "")
ASSETS_BASE_URL = os.getenv("ASSETS_BASE_URL", "").rstrip("/")

# Contact mailer
SMTP_HOST = os.getenv("SMTP_HOST")
SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
SMTP_USER = os.getenv("SMTP_USER")
SMTP_PASSWORD = os.getenv("SMTP_PASSWORD")
SMTP_TLS = os.getenv("SMTP_TLS", "1") not in ("0", "false", "False")
MAIL_FROM = os.getenv("MAIL_FROM", "no-reply@localhost")
CONTACT_RECEIVER = os.getenv("CONTACT_RECEIVER", MAIL_FROM)

# Slugs longer than this are cut when derived from a title
SLUG_MAX_LENGTH = 120
