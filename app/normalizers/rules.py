from copy import deepcopy
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional
from urllib.parse import unquote
import json
import re

from app.settings import SLUG_MAX_LENGTH
from .base import Normalizer
from .fields import FIELD_ALIASES, FIELD_DEFAULTS, GROUP_COLUMNS, MEDIA_FIELDS
from .types import ClientBlogRecord, Record

# Keys that hold the real list when a media column was stored as an object
MEDIA_LIST_KEYS = ("urls", "files", "items")


class RuleNormalizer(Normalizer):
    """
    Alias-table normalizer:
    takes a raw client row or API payload and produces the canonical
    camelCase record every read path returns.
    """
    def normalize_record(self, rec: Record) -> ClientBlogRecord:
        r = deepcopy(dict(rec))  # work on a copy so we don’t mutate the input
        out = {}
        for field, aliases in FIELD_ALIASES.items():
            value = pick(r, aliases)
            if field in MEDIA_FIELDS:
                value = normalize_media_field(value)
            elif value is None:
                value = FIELD_DEFAULTS.get(field)
            out[field] = value

        out["id"] = str(out["id"]) if out["id"] is not None else None
        out["createdAt"] = iso_or_none(out["createdAt"])

        # feature image: explicit field -> first image -> None
        for cols in GROUP_COLUMNS.values():
            feature = cols.field(cols.feature_image)
            images = out[cols.field(cols.images)]
            if out[feature] is None and images:
                out[feature] = images[0]
        return out


# --- Individual field helpers ---

def pick(rec: Mapping, aliases: Iterable[str]) -> Any:
    """First value among `aliases` that is present and not None."""
    for key in aliases:
        value = rec.get(key)
        if value is not None:
            return value
    return None


def normalize_media_field(raw: Any) -> List[str]:
    """
    Coerce any stored/posted media encoding into list[str].

    Accepts a list, None, a JSON array (or object) string, a comma-separated
    string, or an object holding a urls/files/items list. Anything else is [].
    Never raises.
    """
    if raw is None:
        return []
    if isinstance(raw, (list, tuple)):
        return _clean(raw)
    if isinstance(raw, str):
        s = raw.strip()
        if not s:
            return []
        try:
            parsed = json.loads(s)
        except (ValueError, RecursionError):
            # not JSON: comma-separated
            return [part.strip() for part in s.split(",") if part.strip()]
        if isinstance(parsed, list):
            return _clean(parsed)
        if isinstance(parsed, dict):
            return _from_mapping(parsed)
        return []
    if isinstance(raw, Mapping):
        return _from_mapping(raw)
    return []


def _from_mapping(raw: Mapping) -> List[str]:
    for key in MEDIA_LIST_KEYS:
        if isinstance(raw.get(key), list):
            return _clean(raw[key])
    # flatten one level of values
    flat = []
    for value in raw.values():
        if isinstance(value, (list, tuple)):
            flat.extend(value)
        else:
            flat.append(value)
    return _clean(flat)


def _clean(items: Iterable[Any]) -> List[str]:
    return [str(x) for x in items if x]


def derive_slug(title: Optional[str]) -> str:
    """'Hello World' -> 'hello-world' (lowercase, whitespace to dash, truncated)."""
    if not title:
        return ""
    return re.sub(r"\s+", "-", str(title).strip().lower())[:SLUG_MAX_LENGTH]


def canonical_slug(value: Any) -> str:
    """Comparison form of a slug, tolerant of percent-encoding and stray punctuation."""
    if value is None:
        return ""
    s = unquote(str(value)).lower().strip()
    s = re.sub(r"\s+", "-", s)
    s = re.sub(r"[^a-z0-9\-_]", "", s)
    s = re.sub(r"-+", "-", s)
    return s.strip("-")


def iso_or_none(value: Any) -> Optional[str]:
    """Datetimes from the datastore -> ISO-8601; strings pass through."""
    if value is None:
        return None
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)
