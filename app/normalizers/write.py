# app/normalizers/write.py
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence

from .fields import MEDIA_COLUMNS, write_aliases
from .rules import normalize_media_field
from .types import Record


def build_write_object(
    payload: Record,
    allowed_fields: Iterable[str],
    extra_aliases: Optional[Mapping[str, Sequence[str]]] = None,
) -> Dict[str, Any]:
    """
    Copy allow-listed columns out of an inbound POST/PATCH payload.

    A column is taken when one of its keys is *present* on the payload, so an
    explicit None or [] is kept (that is how a client clears a field). Media
    columns are coerced to list[str]. Keys not on the payload never appear.
    """
    extra_aliases = extra_aliases or {}
    out: Dict[str, Any] = {}
    for column in allowed_fields:
        for key in (*write_aliases(column), *extra_aliases.get(column, ())):
            if key in payload:
                value = payload[key]
                if column in MEDIA_COLUMNS:
                    value = normalize_media_field(value)
                out[column] = value
                break
    return out
