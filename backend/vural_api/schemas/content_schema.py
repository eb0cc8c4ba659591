from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import Field

from vural_api.schemas.common import CamelModel


class NewsItem(CamelModel):
    id: str
    title: str
    summary: str
    content: Optional[str] = None
    date: str
    category: Literal["solar", "wind", "general"] = "general"
    source_name: Optional[str] = None
    source_url: Optional[str] = None


class Feature(CamelModel):
    id: str
    icon: str
    title: str
    text: str
    color: Literal["green", "orange", "blue"] = "green"


class Partner(CamelModel):
    id: str
    name: str
    logo_url: str
    site_url: str = "#"


class SocialLink(CamelModel):
    platform: Literal["facebook", "twitter", "instagram", "linkedin", "whatsapp"]
    url: str
    icon: str


class SiteContentUpdate(CamelModel):
    hero_title: Optional[str] = None
    hero_subtitle: Optional[str] = None
    hero_button_text: Optional[str] = None
    hero_images: Optional[List[str]] = None
    about_text: Optional[str] = None
    vision_text: Optional[str] = None
    mission_text: Optional[str] = None
    news_title: Optional[str] = None
    news: Optional[List[NewsItem]] = None
    contact_address: Optional[str] = None
    contact_phone: Optional[str] = None
    contact_email: Optional[str] = None
    features: Optional[List[Feature]] = None
    cta_title: Optional[str] = None
    cta_text: Optional[str] = None
    cta_image_url: Optional[str] = None
    cta_button_text: Optional[str] = None
    partners: Optional[List[Partner]] = None
    social_links: Optional[List[SocialLink]] = None


class SiteContentOut(CamelModel):
    hero_title: str = ""
    hero_subtitle: str = ""
    hero_button_text: str = ""
    hero_images: List[str] = []
    about_text: str = ""
    vision_text: str = ""
    mission_text: str = ""
    news_title: str = ""
    news: List[NewsItem] = []
    contact_address: str = ""
    contact_phone: str = ""
    contact_email: str = ""
    features: List[Feature] = []
    cta_title: str = ""
    cta_text: str = ""
    cta_image_url: str = ""
    cta_button_text: str = ""
    partners: List[Partner] = []
    social_links: List[SocialLink] = []


class Coordinates(CamelModel):
    lat: float
    lng: float


class ProjectStats(CamelModel):
    power: Optional[str] = None
    panels: Optional[str] = None
    area: Optional[str] = None
    co2: Optional[str] = None


class ProjectIn(CamelModel):
    title: str = Field(min_length=1)
    location: str = Field(min_length=1)
    coordinates: Optional[Coordinates] = None
    capacity: str
    date: str
    image_url: Optional[str] = None
    description: Optional[str] = None
    stats: Optional[ProjectStats] = None


class ProjectUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    capacity: Optional[str] = None
    date: Optional[str] = None
    image_url: Optional[str] = None
    description: Optional[str] = None
    stats: Optional[ProjectStats] = None


class ProjectOut(ProjectIn):
    id: str


class MediaItemIn(CamelModel):
    url: str = Field(min_length=1)
    name: str = Field(min_length=1)
    type: Literal["image", "video"] = "image"


class MediaItemOut(MediaItemIn):
    id: str
    date: datetime


PositionType = Literal["Full-time", "Part-time", "Remote", "Hybrid"]


class JobPositionIn(CamelModel):
    title: str = Field(min_length=1)
    location: str = Field(min_length=1)
    type: PositionType = "Full-time"
    description: str = Field(min_length=1)
    requirements: List[str] = []


class JobPositionUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = None
    type: Optional[PositionType] = None
    description: Optional[str] = None
    requirements: Optional[List[str]] = None
    is_active: Optional[bool] = None


class JobPositionOut(JobPositionIn):
    id: str
    is_active: bool
    date: date
