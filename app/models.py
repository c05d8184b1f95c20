import uuid
from enum import Enum

from sqlalchemy import Column, String, Text, DateTime, JSON
from .db import Base


class TableName(str, Enum):
    CLIENTS = "clients"
    CLIENTS_BLOG2 = "clients_blog2"


def _new_id() -> str:
    return uuid.uuid4().hex


# -----------------------------
# Shared column layout for both client tables
# -----------------------------
class ClientColumns:
    id            = Column(String(36), primary_key=True, default=_new_id)
    client_name   = Column(String, nullable=False)
    logo_url      = Column(String, nullable=False)

    # blog 1 content group
    blog_title         = Column(String)
    blog_slug          = Column(String(120), index=True)
    blog_body_html     = Column(Text)
    blog_feature_image = Column(String)
    images             = Column(JSON, nullable=False, default=list)   # list[str]
    videos             = Column(JSON, nullable=False, default=list)   # list[str]
    cta_text           = Column(String)

    # blog 2 content group
    blog2_title         = Column(String)
    blog2_slug          = Column(String(120), index=True)
    blog2_body_html     = Column(Text)
    blog2_feature_image = Column(String)
    blog2_images        = Column(JSON, nullable=False, default=list)
    blog2_videos        = Column(JSON, nullable=False, default=list)

    body_data  = Column(JSON)                                  # opaque editor payload
    created_at = Column(DateTime(timezone=True), index=True)   # set once at creation

    def to_row(self) -> dict:
        """Plain column -> value dict, the shape the normalizer reads."""
        return {c.name: getattr(self, c.name) for c in self.__table__.columns}

    def __repr__(self):
        return f"<{type(self).__name__}(id={self.id}, client_name={self.client_name})>"


class Client(ClientColumns, Base):
    __tablename__ = "clients"


class ClientBlog2(ClientColumns, Base):
    __tablename__ = "clients_blog2"


MODELS = {
    TableName.CLIENTS: Client,
    TableName.CLIENTS_BLOG2: ClientBlog2,
}
