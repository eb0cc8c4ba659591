import logging
from typing import Optional

from sqlalchemy.orm import Session

from vural_api.adapters.storage_mirror import GEMINI_API_KEY, SETTINGS, StorageMirror, get_mirror
from vural_api.repositories.content_repo import SettingRepository
from vural_api.schemas.settings_schema import SettingsOut, SiteSettings

log = logging.getLogger(__name__)


def mask_key(key: str) -> str:
    if not key:
        return ""
    if len(key) <= 8:
        return "*" * len(key)
    return f"{key[:4]}{'*' * (len(key) - 8)}{key[-4:]}"


class SettingsService:
    def __init__(self, db: Session, mirror: Optional[StorageMirror] = None):
        self.db = db
        self.repo = SettingRepository(db)
        self.mirror = mirror or get_mirror()

    def site_settings(self) -> SiteSettings:
        stored = self.repo.get(SETTINGS, {}) or {}
        return SiteSettings.model_validate(stored)

    def allow_registration(self) -> bool:
        return self.site_settings().allow_registration

    def get(self) -> SettingsOut:
        key = self.repo.get(GEMINI_API_KEY, "") or ""
        return SettingsOut(
            **self.site_settings().model_dump(),
            api_key=mask_key(key),
            api_key_set=bool(key),
        )

    def update(self, changes: dict) -> SettingsOut:
        changes = {k: v for k, v in changes.items() if v is not None}
        api_key = changes.pop("api_key", None)

        merged = self.site_settings().model_copy(update=changes)
        blob = merged.to_json()
        self.repo.set(SETTINGS, blob)
        if api_key is not None:
            self.repo.set(GEMINI_API_KEY, api_key.strip())
        self.db.commit()

        self.mirror.safe_write(SETTINGS, blob)
        if api_key is not None:
            self.mirror.safe_write(GEMINI_API_KEY, api_key.strip())
        log.info("settings updated fields=%s key_changed=%s", sorted(changes), api_key is not None)
        return self.get()
