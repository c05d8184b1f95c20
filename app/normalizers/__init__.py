from .pipeline import get_default_normalizer, normalize_record, NormalizerPipeline
from .rules import RuleNormalizer, normalize_media_field, derive_slug, canonical_slug
from .write import build_write_object
from .types import ClientBlogRecord, ContentGroup, Record
from .base import Normalizer

__all__ = [
    "get_default_normalizer",
    "normalize_record",
    "NormalizerPipeline",
    "RuleNormalizer",
    "normalize_media_field",
    "derive_slug",
    "canonical_slug",
    "build_write_object",
    "ClientBlogRecord",
    "ContentGroup",
    "Record",
    "Normalizer",
]
