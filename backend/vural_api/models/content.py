from datetime import date, datetime, timezone

from sqlalchemy import JSON, Boolean, Column, Date, DateTime, Integer, String, Text
from vural_api.db import Base


class SiteContent(Base):
    """Single-row table holding all marketing copy for the public site."""

    __tablename__ = "site_content"
    id = Column(Integer, primary_key=True)
    data = Column(JSON, nullable=False, default=dict)
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))


class Project(Base):
    __tablename__ = "projects"
    id = Column(String(32), primary_key=True, index=True)
    title = Column(String(256), nullable=False)
    location = Column(String(256), nullable=False)
    coordinates = Column(JSON, nullable=True)  # {"lat": .., "lng": ..}
    capacity = Column(String(64), nullable=False)
    date = Column(String(32), nullable=False)
    image_url = Column(String(512), nullable=True)
    description = Column(Text, nullable=True)
    stats = Column(JSON, nullable=True)


class MediaItem(Base):
    __tablename__ = "media_items"
    id = Column(String(32), primary_key=True, index=True)
    url = Column(Text, nullable=False)
    name = Column(String(256), nullable=False)
    type = Column(String(16), default="image", nullable=False)  # image, video
    date = Column(DateTime, default=lambda: datetime.now(timezone.utc), nullable=False, index=True)


class JobPosition(Base):
    __tablename__ = "job_positions"
    id = Column(String(32), primary_key=True, index=True)
    title = Column(String(256), nullable=False)
    location = Column(String(256), nullable=False)
    type = Column(String(16), nullable=False)  # Full-time, Part-time, Remote, Hybrid
    description = Column(Text, nullable=False)
    requirements = Column(JSON, nullable=False, default=list)
    is_active = Column(Boolean, default=True, nullable=False)
    date = Column(Date, default=date.today, nullable=False)
