import smtplib

from app import mailer


def test_send_contact_email(client, monkeypatch):
    sent = []
    monkeypatch.setattr(mailer, "_send_smtp", sent.append)
    r = client.post("/api/send-email", json={
        "name": "Jane <b>Doe</b>", "email": "jane@example.com", "message": "Hi\nthere",
    })
    assert r.status_code == 200
    assert r.json() == {"ok": True}
    assert len(sent) == 1
    msg = sent[0]
    assert msg["Subject"] == "Jane <b>Doe</b> wanted to reach out to you"
    assert msg["Reply-To"] == "jane@example.com"
    html_part = msg.get_body(preferencelist=("html",)).get_content()
    assert "&lt;b&gt;Doe&lt;/b&gt;" in html_part
    assert "Mobile:</strong> N/A" in html_part
    assert "Hi<br/>there" in html_part

def test_send_contact_missing_fields(client, monkeypatch):
    monkeypatch.setattr(mailer, "_send_smtp", lambda msg: None)
    r = client.post("/api/send-email", json={"name": "Jane", "email": "jane@example.com"})
    assert r.status_code == 400

def test_send_contact_smtp_failure(client, monkeypatch):
    def boom(msg):
        raise smtplib.SMTPException("relay denied")
    monkeypatch.setattr(mailer, "_send_smtp", boom)
    r = client.post("/api/send-email", json={"name": "J", "email": "j@x.io", "message": "m", "mobile": "123"})
    assert r.status_code == 500
    assert r.json()["ok"] is False
