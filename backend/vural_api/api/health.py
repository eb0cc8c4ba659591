import os

from fastapi import APIRouter
from sqlalchemy import text

from vural_api.adapters.storage_mirror import get_mirror
from vural_api.db import engine

router = APIRouter()


@router.get("/health", tags=["health"])
def health():
    db_ok = False
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            db_ok = True
    except Exception:
        db_ok = False

    mirror = get_mirror()
    if mirror.enabled:
        # the directory is created on first write
        storage_ok = not os.path.exists(mirror.directory) or os.access(mirror.directory, os.W_OK)
    else:
        storage_ok = True

    return {
        "status": "ok" if db_ok and storage_ok else "degraded",
        "db": db_ok,
        "storage_mirror": storage_ok,
    }
