from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from app.db import get_db
from app.normalizers import ContentGroup
from app.repositories import find_by_slug, list_group
from app.routers.admin import UNAVAILABLE_HEADER

router = APIRouter(prefix="/api", tags=["blog"])


def _list(group: ContentGroup, response: Response, db: Session) -> List[Dict[str, Any]]:
    rows = list_group(db, group)
    if rows.unavailable:
        response.headers[UNAVAILABLE_HEADER] = "true"
    return list(rows)


@router.get("/blog")
def list_blog(response: Response, db: Session = Depends(get_db)) -> List[Dict[str, Any]]:
    """Published blog posts (records with a blog slug)."""
    return _list(ContentGroup.PRIMARY, response, db)


@router.get("/blog/{slug}")
def read_blog(slug: str, db: Session = Depends(get_db)) -> Dict[str, Any]:
    return find_by_slug(db, ContentGroup.PRIMARY, slug)


@router.get("/blog2")
def list_blog2(response: Response, db: Session = Depends(get_db)) -> List[Dict[str, Any]]:
    """Published blog2 posts from clients_blog2 and the blog2 group of clients."""
    return _list(ContentGroup.SECONDARY, response, db)


@router.get("/blog2/{slug}")
def read_blog2(slug: str, db: Session = Depends(get_db)) -> Dict[str, Any]:
    return find_by_slug(db, ContentGroup.SECONDARY, slug)
