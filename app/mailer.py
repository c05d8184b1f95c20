# app/mailer.py
from __future__ import annotations
import html
import logging
import smtplib
from datetime import datetime
from email.message import EmailMessage
from typing import Optional

from app import settings

log = logging.getLogger(__name__)


def _send_smtp(msg: EmailMessage) -> None:
    if not settings.SMTP_HOST:
        # Dev fallback: log instead of sending
        log.info("SMTP not configured, contact email not sent:\n%s", msg)
        return
    with smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT) as s:
        if settings.SMTP_TLS:
            s.starttls()
        if settings.SMTP_USER and settings.SMTP_PASSWORD:
            s.login(settings.SMTP_USER, settings.SMTP_PASSWORD)
        s.send_message(msg)


def build_contact_email(name: str, email: str, message: str, mobile: Optional[str] = None,
                        *, sender: Optional[str] = None, receiver: Optional[str] = None) -> EmailMessage:
    sender = sender or settings.MAIL_FROM
    receiver = receiver or settings.CONTACT_RECEIVER
    mobile = mobile or "N/A"

    text = (
        f"You have a new contact form submission:\n\n"
        f"Name: {name}\n"
        f"Mobile: {mobile}\n"
        f"Email: {email}\n\n"
        f"Message:\n{message}\n\n"
        f"-- Sent from website contact form"
    )
    esc = html.escape
    body_html = (
        '<div style="font-family: Arial, sans-serif; padding:20px;">'
        "<h2>New Contact Form Message</h2>"
        f"<p><strong>Name:</strong> {esc(name)}</p>"
        f"<p><strong>Email:</strong> {esc(email)}</p>"
        f"<p><strong>Mobile:</strong> {esc(mobile)}</p>"
        "<hr/><p><strong>Message:</strong></p>"
        f"<p>{esc(message).replace(chr(10), '<br/>')}</p>"
        f'<hr/><p style="font-size:12px;color:#666">Sent from website contact form<br/>'
        f"{datetime.now():%Y-%m-%d %H:%M}</p>"
        "</div>"
    )

    msg = EmailMessage()
    msg["From"] = f"Website Contact <{sender}>"
    msg["To"] = receiver
    # headers must stay single-line
    msg["Reply-To"] = "".join(email.split())
    msg["Subject"] = f"{' '.join(name.split())} wanted to reach out to you"
    msg.set_content(text)
    msg.add_alternative(body_html, subtype="html")
    return msg


def send_contact_email(name: str, email: str, message: str, mobile: Optional[str] = None) -> None:
    msg = build_contact_email(name, email, message, mobile)
    _send_smtp(msg)
    log.info("contact email sent: from=%s", email)
