from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from vural_api.adapters.storage_mirror import GEMINI_API_KEY, KNOWN_KEYS, get_mirror
from vural_api.api.deps import require_admin
from vural_api.db import get_db
from vural_api.schemas.inbox_schema import QuoteOut
from vural_api.services.dashboard_service import DashboardService
from vural_api.services.settings_service import mask_key

router = APIRouter(tags=["admin"])


@router.get("/admin/dashboard", summary="Counts and recent activity for the admin overview")
def dashboard(db: Session = Depends(get_db), _=Depends(require_admin)):
    data = DashboardService(db).summary()
    data["recentQuotes"] = [QuoteOut.model_validate(q).to_json() for q in data["recentQuotes"]]
    return data


@router.get("/storage/{key}", summary="Read a mirrored collection")
def read_storage(key: str, _=Depends(require_admin)):
    if key not in KNOWN_KEYS:
        raise HTTPException(status_code=404, detail=f"Unknown storage key: {key}")
    value = get_mirror().read(key)
    if key == GEMINI_API_KEY and value:
        value = mask_key(value)
    return {"key": key, "value": value}
