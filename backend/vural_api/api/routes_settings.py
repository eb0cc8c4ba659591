from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from vural_api.api.deps import require_admin
from vural_api.db import get_db
from vural_api.schemas.settings_schema import SettingsUpdate
from vural_api.services.settings_service import SettingsService

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", summary="Site settings (API key masked)")
def get_settings(db: Session = Depends(get_db), _=Depends(require_admin)):
    return SettingsService(db).get().to_json()


@router.put("", summary="Update site settings")
def update_settings(payload: SettingsUpdate, db: Session = Depends(get_db), _=Depends(require_admin)):
    return SettingsService(db).update(payload.changes()).to_json()
