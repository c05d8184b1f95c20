# app/normalizers/fields.py
"""
Field policy tables.

Raw records arrive with snake_case keys (datastore rows), camelCase keys
(admin UI payloads) and a handful of legacy names. Everything here is data so
the alias policy can be read and tested without running the normalizer.
"""
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .types import ContentGroup

# canonical field -> aliases tried in order; the first non-None value wins
FIELD_ALIASES: Dict[str, List[str]] = {
    "id":                ["id"],
    "clientName":        ["client_name", "clientName", "name"],
    "logoUrl":           ["logo_url", "logoUrl", "logo"],
    "blogTitle":         ["blog_title", "blogTitle", "title"],
    "blogSlug":          ["blog_slug", "blogSlug", "slug"],
    "blogBodyHtml":      ["blog_body_html", "blogBodyHtml", "body"],
    "blogFeatureImage":  ["blog_feature_image", "blog_feature_image_url", "blogFeatureImageUrl",
                          "blogFeatureImage", "feature_image", "featureImage"],
    "images":            ["images", "image_urls", "imageUrls", "images_json", "image"],
    "videos":            ["videos", "video_urls", "videoUrls", "videos_json", "video"],
    "ctaText":           ["cta_text", "ctaText"],
    "blog2Title":        ["blog2_title", "blog2Title"],
    "blog2Slug":         ["blog2_slug", "blog2Slug"],
    "blog2BodyHtml":     ["blog2_body_html", "blog2BodyHtml"],
    "blog2FeatureImage": ["blog2_feature_image", "blog2_feature_image_url", "blog2FeatureImageUrl",
                          "blog2FeatureImage"],
    "blog2Images":       ["blog2_images", "blog2_images_json", "blog2Images"],
    "blog2Videos":       ["blog2_videos", "blog2_videos_json", "blog2Videos"],
    "bodyData":          ["body_data", "bodyData"],
    "createdAt":         ["created_at", "createdAt"],
}

# value used when no alias is present
FIELD_DEFAULTS: Dict[str, object] = {
    "clientName": "",
    "logoUrl": "",
    "blogTitle": "",
    "blogSlug": "",
    "blogBodyHtml": "",
    "ctaText": "Read full Case Study",
}

MEDIA_FIELDS = frozenset({"images", "videos", "blog2Images", "blog2Videos"})

# datastore column -> canonical field
COLUMN_FIELDS: Dict[str, str] = {
    "client_name": "clientName",
    "logo_url": "logoUrl",
    "blog_title": "blogTitle",
    "blog_slug": "blogSlug",
    "blog_body_html": "blogBodyHtml",
    "blog_feature_image": "blogFeatureImage",
    "images": "images",
    "videos": "videos",
    "cta_text": "ctaText",
    "blog2_title": "blog2Title",
    "blog2_slug": "blog2Slug",
    "blog2_body_html": "blog2BodyHtml",
    "blog2_feature_image": "blog2FeatureImage",
    "blog2_images": "blog2Images",
    "blog2_videos": "blog2Videos",
    "body_data": "bodyData",
}

MEDIA_COLUMNS = frozenset(c for c, f in COLUMN_FIELDS.items() if f in MEDIA_FIELDS)


@dataclass(frozen=True)
class GroupColumns:
    """Column names of one content group (blog / blog2)."""
    title: str
    slug: str
    body_html: str
    feature_image: str
    images: str
    videos: str

    @property
    def columns(self) -> Tuple[str, ...]:
        return (self.title, self.slug, self.body_html, self.feature_image, self.images, self.videos)

    def field(self, column: str) -> str:
        return COLUMN_FIELDS[column]


GROUP_COLUMNS: Dict[ContentGroup, GroupColumns] = {
    ContentGroup.PRIMARY: GroupColumns(
        title="blog_title", slug="blog_slug", body_html="blog_body_html",
        feature_image="blog_feature_image", images="images", videos="videos",
    ),
    ContentGroup.SECONDARY: GroupColumns(
        title="blog2_title", slug="blog2_slug", body_html="blog2_body_html",
        feature_image="blog2_feature_image", images="blog2_images", videos="blog2_videos",
    ),
}


def write_aliases(column: str) -> Tuple[str, str]:
    """Payload keys accepted for a column on write: snake_case, then camelCase."""
    return column, COLUMN_FIELDS[column]
