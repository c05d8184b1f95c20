import logging
import smtplib
from typing import Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app import mailer

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["contact"])


# Fields default to empty so a missing one is a 400, not a schema 422
class ContactMessage(BaseModel):
    name: str = ""
    email: str = ""
    mobile: Optional[str] = None
    message: str = ""


@router.post("/send-email")
def send_email(req: ContactMessage):
    """
    Contact form → notification email to the agency inbox.

    Request body:
      {"name": "...", "email": "...", "mobile": "optional", "message": "..."}
    """
    name, email, message = req.name.strip(), req.email.strip(), req.message.strip()
    if not name or not email or not message:
        raise HTTPException(400, "Missing required fields: name, email, message")

    try:
        mailer.send_contact_email(name, email, message, (req.mobile or "").strip() or None)
    except (smtplib.SMTPException, OSError):
        log.exception("contact email failed: from=%s", email)
        return JSONResponse({"ok": False, "error": "Email send failed"}, status_code=500)
    return {"ok": True}
