from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from vural_api.api.deps import get_optional_user, require_admin
from vural_api.db import get_db
from vural_api.schemas.content_schema import (
    JobPositionIn,
    JobPositionOut,
    JobPositionUpdate,
    MediaItemIn,
    MediaItemOut,
    ProjectIn,
    ProjectOut,
    ProjectUpdate,
    SiteContentUpdate,
)
from vural_api.services.content_service import ContentService

router = APIRouter(tags=["content"])


@router.get("/content", summary="Site content document")
def get_content(db: Session = Depends(get_db)):
    return ContentService(db).get_site_content()


@router.put("/content", summary="Merge changes into the site content")
def update_content(payload: SiteContentUpdate, db: Session = Depends(get_db), _=Depends(require_admin)):
    changes = payload.model_dump(by_alias=True, exclude_unset=True, mode="json")
    return ContentService(db).update_site_content(changes)


# --- projects ---

@router.get("/projects", summary="List reference projects")
def list_projects(db: Session = Depends(get_db)):
    return [ProjectOut.model_validate(p).to_json() for p in ContentService(db).list_projects()]


@router.post("/projects", status_code=201, summary="Create project")
def create_project(payload: ProjectIn, db: Session = Depends(get_db), _=Depends(require_admin)):
    p = ContentService(db).add_project(payload.model_dump())
    return ProjectOut.model_validate(p).to_json()


@router.put("/projects/{project_id}", summary="Update project")
def update_project(
    project_id: str, payload: ProjectUpdate, db: Session = Depends(get_db), _=Depends(require_admin)
):
    p = ContentService(db).update_project(project_id, payload.changes())
    return ProjectOut.model_validate(p).to_json()


@router.delete("/projects/{project_id}", summary="Delete project")
def delete_project(project_id: str, db: Session = Depends(get_db), _=Depends(require_admin)):
    ContentService(db).delete_project(project_id)
    return {"success": True}


# --- media library ---

@router.get("/media", summary="List media items")
def list_media(db: Session = Depends(get_db), _=Depends(require_admin)):
    return [MediaItemOut.model_validate(m).to_json() for m in ContentService(db).list_media()]


@router.post("/media", status_code=201, summary="Add media item")
def add_media(payload: MediaItemIn, db: Session = Depends(get_db), _=Depends(require_admin)):
    m = ContentService(db).add_media(payload.model_dump())
    return MediaItemOut.model_validate(m).to_json()


@router.delete("/media/{media_id}", summary="Delete media item")
def delete_media(media_id: str, db: Session = Depends(get_db), _=Depends(require_admin)):
    ContentService(db).delete_media(media_id)
    return {"success": True}


# --- job positions ---

@router.get("/jobs", summary="List job positions")
def list_jobs(db: Session = Depends(get_db), user=Depends(get_optional_user)):
    # visitors only see open positions; admins see all of them
    active_only = not (user and user.is_admin)
    return [
        JobPositionOut.model_validate(p).to_json()
        for p in ContentService(db).list_positions(active_only=active_only)
    ]


@router.post("/jobs", status_code=201, summary="Open a job position")
def create_job(payload: JobPositionIn, db: Session = Depends(get_db), _=Depends(require_admin)):
    pos = ContentService(db).add_position(payload.model_dump())
    return JobPositionOut.model_validate(pos).to_json()


@router.put("/jobs/{position_id}", summary="Update job position")
def update_job(
    position_id: str, payload: JobPositionUpdate, db: Session = Depends(get_db), _=Depends(require_admin)
):
    pos = ContentService(db).update_position(position_id, payload.changes())
    return JobPositionOut.model_validate(pos).to_json()


@router.delete("/jobs/{position_id}", summary="Delete job position")
def delete_job(position_id: str, db: Session = Depends(get_db), _=Depends(require_admin)):
    ContentService(db).delete_position(position_id)
    return {"success": True}
