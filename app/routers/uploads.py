import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from starlette.concurrency import run_in_threadpool

from app.settings import UPLOAD_MAX_BYTES
from app.storage import BlobStore, get_blob_store

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["uploads"])


def human(n: int) -> str:
    if n < 1024:
        return f"{n} B"
    if n < 1024 * 1024:
        return f"{n / 1024:.1f} KB"
    return f"{n / (1024 * 1024):.2f} MB"


def _check_size(name: str, size: int) -> None:
    if size > UPLOAD_MAX_BYTES:
        msg = f"File too large: '{name}' is {human(size)}, max allowed {human(UPLOAD_MAX_BYTES)}."
        log.warning("upload rejected: %s", msg)
        raise HTTPException(413, msg)


@router.post("/uploads", status_code=201)
async def upload_files(
    file: Optional[UploadFile] = File(None),
    files: Optional[List[UploadFile]] = File(None),
    store: BlobStore = Depends(get_blob_store),
):
    """
    Multipart upload of a single `file` and/or several `files`.

    Files are stored one at a time; a failure stops the batch and files
    already stored stay in the bucket.

    Returns:
      {"url", "path"} for one file, {"urls": [...], "paths": [...]} otherwise.
    """
    batch = ([file] if file is not None else []) + list(files or [])
    if not batch:
        raise HTTPException(400, "No file provided")

    urls: List[str] = []
    paths: List[str] = []
    for f in batch:
        name = f.filename or "unnamed"
        # the multipart parser records the spooled size; reject before reading it back
        if f.size is not None:
            _check_size(name, f.size)
        data = await f.read()
        _check_size(name, len(data))

        key = await run_in_threadpool(store.store, data, f.content_type, name)
        urls.append(store.public_url(key))
        paths.append(key)
        log.info("uploaded file=%s size=%s key=%s", name, human(len(data)), key)

    if len(urls) == 1:
        return {"url": urls[0], "path": paths[0]}
    return {"urls": urls, "paths": paths}
