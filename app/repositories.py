import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple, Type

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import NotFoundError, UpstreamError, ValidationError
from app.models import MODELS, ClientColumns, TableName
from app.normalizers import (
    ClientBlogRecord,
    ContentGroup,
    build_write_object,
    canonical_slug,
    derive_slug,
    normalize_record,
)
from app.normalizers.fields import COLUMN_FIELDS, GROUP_COLUMNS, MEDIA_COLUMNS

log = logging.getLogger(__name__)

COMMON_COLUMNS = ("client_name", "logo_url")
REQUIRED_COLUMNS = ("client_name", "logo_url")
# every column except media lists and the opaque body_data payload
TEXT_COLUMNS = frozenset(c for c in COLUMN_FIELDS if c not in MEDIA_COLUMNS and c != "body_data")


@dataclass(frozen=True)
class TableSpec:
    """How one client table is written: which groups it carries and which columns it accepts."""
    name: TableName
    model: Type[ClientColumns]
    groups: Tuple[ContentGroup, ...]
    allowed_fields: Tuple[str, ...]
    extra_aliases: Mapping[str, Sequence[str]] = field(default_factory=dict)


def _allowed(groups: Iterable[ContentGroup], extra: Sequence[str] = ()) -> Tuple[str, ...]:
    cols: List[str] = list(COMMON_COLUMNS)
    for g in groups:
        cols.extend(GROUP_COLUMNS[g].columns)
    cols.extend(extra)
    return tuple(cols)


TABLES: Dict[TableName, TableSpec] = {
    TableName.CLIENTS: TableSpec(
        name=TableName.CLIENTS,
        model=MODELS[TableName.CLIENTS],
        groups=(ContentGroup.PRIMARY, ContentGroup.SECONDARY),
        allowed_fields=_allowed((ContentGroup.PRIMARY, ContentGroup.SECONDARY), ("cta_text", "body_data")),
    ),
    TableName.CLIENTS_BLOG2: TableSpec(
        name=TableName.CLIENTS_BLOG2,
        model=MODELS[TableName.CLIENTS_BLOG2],
        groups=(ContentGroup.SECONDARY,),
        allowed_fields=_allowed((ContentGroup.SECONDARY,)),
        # the blog2 admin form historically posted its title as blog_title
        extra_aliases={"blog2_title": ("blog_title", "blogTitle")},
    ),
}

# Tables searched for a public slug, in order
GROUP_TABLES: Dict[ContentGroup, Tuple[TableName, ...]] = {
    ContentGroup.PRIMARY: (TableName.CLIENTS,),
    ContentGroup.SECONDARY: (TableName.CLIENTS_BLOG2, TableName.CLIENTS),
}


class RecordList(list):
    """
    List of canonical records. `unavailable` is True when the datastore
    could not be read, so callers can tell "no records" from "store down".
    """
    def __init__(self, items=(), unavailable: bool = False):
        super().__init__(items)
        self.unavailable = unavailable


def get_table(table: TableName) -> TableSpec:
    return TABLES[TableName(table)]


# --------------------------------------------------------------------
# Reads
# --------------------------------------------------------------------
def list_records(db: Session, table: TableName) -> RecordList:
    """All rows newest first. Datastore errors yield an empty, `unavailable` list."""
    spec = get_table(table)
    try:
        rows = db.execute(
            select(spec.model).order_by(spec.model.created_at.desc())
        ).scalars().all()
    except SQLAlchemyError:
        db.rollback()
        log.exception("list failed, serving empty result: table=%s", spec.name.value)
        return RecordList(unavailable=True)
    return RecordList(normalize_record(r.to_row()) for r in rows)


def get_record(db: Session, table: TableName, record_id: str) -> ClientBlogRecord:
    spec = get_table(table)
    row = _load(db, spec, record_id)
    return normalize_record(row.to_row())


def find_by_slug(db: Session, group: ContentGroup, slug: str) -> ClientBlogRecord:
    """
    Public blog lookup. Compares canonical slugs; on collisions the newest
    record wins because list_records is ordered newest first.
    """
    wanted = canonical_slug(slug)
    if not wanted:
        raise NotFoundError(f"No blog found for slug: {slug}")
    slug_field = GROUP_COLUMNS[group].field(GROUP_COLUMNS[group].slug)
    for table in GROUP_TABLES[group]:
        recs = list_records(db, table)
        if recs.unavailable:
            raise UpstreamError(f"Datastore unavailable while reading {table.value}")
        for rec in recs:
            if canonical_slug(rec[slug_field]) == wanted:
                return rec
    raise NotFoundError(f"No blog found for slug: {slug}")


def list_group(db: Session, group: ContentGroup) -> RecordList:
    """Records that publish a post in `group` (non-empty slug), newest first."""
    cols = GROUP_COLUMNS[group]
    slug_field = cols.field(cols.slug)
    out = RecordList()
    for table in GROUP_TABLES[group]:
        recs = list_records(db, table)
        out.unavailable = out.unavailable or recs.unavailable
        out.extend(r for r in recs if r[slug_field])
    out.sort(key=lambda r: r["createdAt"] or "", reverse=True)
    return out


# --------------------------------------------------------------------
# Writes
# --------------------------------------------------------------------
def create_record(db: Session, table: TableName, payload: dict) -> ClientBlogRecord:
    spec = get_table(table)
    values = build_write_object(payload, spec.allowed_fields, spec.extra_aliases)
    for col in REQUIRED_COLUMNS + tuple(GROUP_COLUMNS[g].title for g in spec.groups):
        if isinstance(values.get(col), str):
            values[col] = values[col].strip()

    _check_types(spec, values)
    _validate_new(spec, values)

    for g in spec.groups:
        cols = GROUP_COLUMNS[g]
        if values.get(cols.title) and not values.get(cols.slug):
            values[cols.slug] = derive_slug(values[cols.title])
    for col in MEDIA_COLUMNS:
        values.setdefault(col, [])
    values["created_at"] = datetime.now(timezone.utc)

    row = spec.model(**values)
    try:
        db.add(row)
        db.commit()
        db.refresh(row)
    except SQLAlchemyError as e:
        db.rollback()
        log.exception("insert failed: table=%s client_name=%s", spec.name.value, values.get("client_name"))
        raise UpstreamError(f"Insert failed: {e}") from e

    log.info("record created: table=%s id=%s", spec.name.value, row.id)
    return normalize_record(row.to_row())


def update_record(db: Session, table: TableName, record_id: str, payload: dict) -> ClientBlogRecord:
    """Partial update: only allow-listed keys present on the payload are written."""
    spec = get_table(table)
    values = build_write_object(payload, spec.allowed_fields, spec.extra_aliases)
    if not values:
        raise ValidationError("No updatable fields provided")
    _check_types(spec, values)
    blanked = [c for c in REQUIRED_COLUMNS if c in values and not str(values[c] or "").strip()]
    if blanked:
        raise ValidationError(f"Required fields cannot be cleared: {', '.join(blanked)}")

    row = _load(db, spec, record_id)
    for col, value in values.items():
        setattr(row, col, value)
    try:
        db.commit()
        db.refresh(row)
    except SQLAlchemyError as e:
        db.rollback()
        log.exception("update failed: table=%s id=%s", spec.name.value, record_id)
        raise UpstreamError(f"Update failed: {e}") from e

    log.info("record updated: table=%s id=%s fields=%s", spec.name.value, record_id, sorted(values))
    return normalize_record(row.to_row())


def delete_record(db: Session, table: TableName, record_id: str) -> ClientBlogRecord:
    """Hard delete; referenced blobs are left in the bucket."""
    spec = get_table(table)
    row = _load(db, spec, record_id)
    deleted = normalize_record(row.to_row())
    try:
        db.delete(row)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        log.exception("delete failed: table=%s id=%s", spec.name.value, record_id)
        raise UpstreamError(f"Delete failed: {e}") from e

    log.info("record deleted: table=%s id=%s", spec.name.value, record_id)
    return deleted


# --------------------------------------------------------------------
# Helpers
# --------------------------------------------------------------------
def _load(db: Session, spec: TableSpec, record_id: str) -> ClientColumns:
    try:
        row = db.get(spec.model, record_id)
    except SQLAlchemyError as e:
        db.rollback()
        log.exception("lookup failed: table=%s id=%s", spec.name.value, record_id)
        raise UpstreamError(f"Lookup failed: {e}") from e
    if row is None:
        raise NotFoundError(f"No {spec.name.value} record with id {record_id}")
    return row


def _check_types(spec: TableSpec, values: dict) -> None:
    """Text columns take strings (or None); anything else is a caller error, not a datastore one."""
    wrong = sorted(c for c, v in values.items() if c in TEXT_COLUMNS and v is not None and not isinstance(v, str))
    if wrong:
        log.warning("write rejected: table=%s non-string=%s", spec.name.value, wrong)
        raise ValidationError(f"Fields must be strings: {', '.join(wrong)}")


def _validate_new(spec: TableSpec, values: dict) -> None:
    titles = [GROUP_COLUMNS[g].title for g in spec.groups]
    missing = []
    if not values.get("client_name"):
        missing.append("client_name")
    if not any(values.get(t) for t in titles):
        missing.append(" or ".join(titles))
    if missing:
        log.warning("create rejected: table=%s missing=%s", spec.name.value, missing)
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")
    if not values.get("logo_url"):
        log.warning("create rejected: table=%s missing=logo_url", spec.name.value)
        raise ValidationError("Missing required field: logo_url")
