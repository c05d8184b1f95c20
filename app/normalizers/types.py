# app/normalizers/types.py
from enum import Enum
from typing import Any, Dict, List, Optional, TypedDict

Record = Dict[str, Any]


class ContentGroup(str, Enum):
    PRIMARY = "primary"      # blog
    SECONDARY = "secondary"  # blog2


class ClientBlogRecord(TypedDict):
    id: Optional[str]
    clientName: str
    logoUrl: str
    blogTitle: str
    blogSlug: str
    blogBodyHtml: str
    blogFeatureImage: Optional[str]
    images: List[str]
    videos: List[str]
    ctaText: str
    blog2Title: Optional[str]
    blog2Slug: Optional[str]
    blog2BodyHtml: Optional[str]
    blog2FeatureImage: Optional[str]
    blog2Images: List[str]
    blog2Videos: List[str]
    bodyData: Any
    createdAt: Optional[str]
