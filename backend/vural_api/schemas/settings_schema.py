from typing import Optional

from vural_api.schemas.common import CamelModel


class SiteSettings(CamelModel):
    site_name: str = "Vural Enerji"
    maintenance_mode: bool = False
    email_notifications: bool = True
    allow_registration: bool = True
    dark_mode_default: bool = False
    contact_email: str = "info@vuralenerji.com"


class SettingsOut(SiteSettings):
    api_key: str = ""
    api_key_set: bool = False


class SettingsUpdate(CamelModel):
    site_name: Optional[str] = None
    maintenance_mode: Optional[bool] = None
    email_notifications: Optional[bool] = None
    allow_registration: Optional[bool] = None
    dark_mode_default: Optional[bool] = None
    contact_email: Optional[str] = None
    api_key: Optional[str] = None
