from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Response
from sqlalchemy.orm import Session

from app.db import get_db
from app.models import TableName
from app.repositories import (
    create_record,
    delete_record,
    get_record,
    list_records,
    update_record,
)

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="/api/admin", tags=["admin"])

# Set on list responses when the datastore could not be read
UNAVAILABLE_HEADER = "X-Records-Unavailable"


@router.get("/{table}")
def list_clients(table: TableName, response: Response, db: Session = Depends(get_db)) -> List[Dict[str, Any]]:
    """
    List every record of `table` (clients | clients_blog2), newest first.

    A datastore failure still answers 200 with [] so the admin page renders,
    but the X-Records-Unavailable header tells the two cases apart.
    """
    rows = list_records(db, table)
    if rows.unavailable:
        response.headers[UNAVAILABLE_HEADER] = "true"
    return list(rows)


@router.post("/{table}", status_code=201)
def create_client(
    table: TableName,
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    """
    Create a record. Accepts snake_case or camelCase keys.

    Required: client_name, logo_url and a blog title (blog_title or
    blog2_title on `clients`, blog2_title on `clients_blog2`).
    Missing slugs are derived from the titles.

    Returns: {"success": True, "row": <canonical record>}
    """
    row = create_record(db, table, payload)
    return {"success": True, "row": row}


@router.get("/{table}/{record_id}")
def get_client(table: TableName, record_id: str, db: Session = Depends(get_db)) -> Dict[str, Any]:
    return get_record(db, table, record_id)


@router.patch("/{table}/{record_id}")
def update_client(
    table: TableName,
    record_id: str,
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    """
    Partial update. Only keys present in the body are written; send
    `"videos": []` (or null) to clear a media list.
    """
    row = update_record(db, table, record_id, payload)
    return {"success": True, "row": row}


@router.delete("/{table}/{record_id}")
def delete_client(table: TableName, record_id: str, db: Session = Depends(get_db)) -> Dict[str, Any]:
    row = delete_record(db, table, record_id)
    return {"success": True, "row": row}
