import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from vural_api.adapters.storage_mirror import (
    MEDIA_LIBRARY,
    OPEN_POSITIONS,
    SITE_CONTENT,
    StorageMirror,
    get_mirror,
)
from vural_api.models.content import JobPosition, MediaItem, Project
from vural_api.repositories.content_repo import (
    JobPositionRepository,
    MediaRepository,
    ProjectRepository,
    SiteContentRepository,
)
from vural_api.schemas.content_schema import JobPositionOut, MediaItemOut, SiteContentOut
from vural_api.services.errors import NotFound

log = logging.getLogger(__name__)

PROJECT_NULLABLE_FIELDS = {"coordinates", "image_url", "description", "stats"}


class ContentService:
    """
    Marketing content managed from the admin panel: the single site-content
    document, reference projects, the media library and open job positions.
    """

    def __init__(self, db: Session, mirror: Optional[StorageMirror] = None):
        self.db = db
        self.site = SiteContentRepository(db)
        self.projects = ProjectRepository(db)
        self.media = MediaRepository(db)
        self.positions = JobPositionRepository(db)
        self.mirror = mirror or get_mirror()

    # --- site content ---

    def get_site_content(self) -> dict:
        row = self.site.get()
        return SiteContentOut.model_validate(row.data if row else {}).to_json()

    def update_site_content(self, changes: dict) -> dict:
        """Merge ``changes`` (camelCase keys) over the stored document."""
        current = self.get_site_content()
        current.update({k: v for k, v in changes.items() if v is not None})
        merged = SiteContentOut.model_validate(current).to_json()
        row = self.site.save(merged)
        row.updated_at = datetime.now(timezone.utc)
        self.db.commit()
        self.mirror.safe_write(SITE_CONTENT, merged)
        log.info("site content updated keys=%s", sorted(changes))
        return merged

    # --- projects ---

    def list_projects(self) -> List[Project]:
        return self.projects.list()

    def get_project(self, project_id: str) -> Project:
        p = self.projects.get(project_id)
        if not p:
            raise NotFound("Project not found")
        return p

    def add_project(self, fields: dict) -> Project:
        p = self.projects.add(fields)
        self.db.commit()
        log.info("project created id=%s", p.id)
        return p

    def update_project(self, project_id: str, changes: dict) -> Project:
        p = self.get_project(project_id)
        changes = {k: v for k, v in changes.items() if v is not None or k in PROJECT_NULLABLE_FIELDS}
        self.projects.update(p, changes)
        self.db.commit()
        return p

    def delete_project(self, project_id: str) -> None:
        p = self.get_project(project_id)
        self.projects.delete(p)
        self.db.commit()
        log.info("project deleted id=%s", project_id)

    # --- media library ---

    def list_media(self) -> List[MediaItem]:
        return self.media.list()

    def add_media(self, fields: dict) -> MediaItem:
        m = self.media.add(fields)
        self.db.commit()
        self._mirror_media()
        log.info("media added id=%s type=%s", m.id, m.type)
        return m

    def delete_media(self, media_id: str) -> None:
        m = self.media.get(media_id)
        if not m:
            raise NotFound("Media item not found")
        self.media.delete(m)
        self.db.commit()
        self._mirror_media()

    def _mirror_media(self):
        rows = self.media.list()
        self.mirror.safe_write(MEDIA_LIBRARY, [MediaItemOut.model_validate(m).to_json() for m in rows])

    # --- job positions ---

    def list_positions(self, active_only: bool = False) -> List[JobPosition]:
        return self.positions.list(is_active=True if active_only else None)

    def get_position(self, position_id: str) -> JobPosition:
        pos = self.positions.get(position_id)
        if not pos:
            raise NotFound("Position not found")
        return pos

    def add_position(self, fields: dict) -> JobPosition:
        fields["is_active"] = True
        pos = self.positions.add(fields)
        self.db.commit()
        self._mirror_positions()
        log.info("job position opened id=%s", pos.id)
        return pos

    def update_position(self, position_id: str, changes: dict) -> JobPosition:
        pos = self.get_position(position_id)
        changes = {k: v for k, v in changes.items() if v is not None}
        self.positions.update(pos, changes)
        self.db.commit()
        self._mirror_positions()
        return pos

    def delete_position(self, position_id: str) -> None:
        pos = self.get_position(position_id)
        self.positions.delete(pos)
        self.db.commit()
        self._mirror_positions()

    def _mirror_positions(self):
        rows = self.positions.list()
        self.mirror.safe_write(OPEN_POSITIONS, [JobPositionOut.model_validate(p).to_json() for p in rows])
