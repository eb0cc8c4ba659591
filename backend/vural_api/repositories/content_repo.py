from typing import Optional

from vural_api.models.app_setting import AppSetting
from vural_api.models.blog import BlogPost, Comment
from vural_api.models.content import JobPosition, MediaItem, Project, SiteContent
from vural_api.models.inbox import ContactMessage, JobApplication, QuoteRequest
from vural_api.models.solar_package import SolarPackage
from vural_api.repositories.base import CrudRepository


class QuoteRepository(CrudRepository[QuoteRequest]):
    model = QuoteRequest
    id_prefix = "qt-"
    order_by = QuoteRequest.date.desc()


class ContactMessageRepository(CrudRepository[ContactMessage]):
    model = ContactMessage
    id_prefix = "msg-"
    order_by = ContactMessage.date.desc()


class JobApplicationRepository(CrudRepository[JobApplication]):
    model = JobApplication
    id_prefix = "job-"
    order_by = JobApplication.date.desc()


class JobPositionRepository(CrudRepository[JobPosition]):
    model = JobPosition
    id_prefix = "pos-"
    order_by = JobPosition.date.desc()


class ProjectRepository(CrudRepository[Project]):
    model = Project
    id_prefix = "prj-"
    order_by = Project.date.desc()


class MediaRepository(CrudRepository[MediaItem]):
    model = MediaItem
    id_prefix = "media-"
    order_by = MediaItem.date.desc()


class BlogPostRepository(CrudRepository[BlogPost]):
    model = BlogPost
    id_prefix = "blog-"
    order_by = BlogPost.date.desc()

    def get_by_slug(self, slug: str) -> Optional[BlogPost]:
        return self.db.query(BlogPost).filter(BlogPost.slug == slug).first()

    def slug_taken(self, slug: str, exclude_id: str = None) -> bool:
        q = self.db.query(BlogPost.id).filter(BlogPost.slug == slug)
        if exclude_id:
            q = q.filter(BlogPost.id != exclude_id)
        return q.first() is not None


class CommentRepository(CrudRepository[Comment]):
    model = Comment
    id_prefix = "c"


class SolarPackageRepository(CrudRepository[SolarPackage]):
    model = SolarPackage
    id_prefix = "pkg-"
    order_by = SolarPackage.min_bill.asc()


class SiteContentRepository:
    ROW_ID = 1

    def __init__(self, db):
        self.db = db

    def get(self) -> Optional[SiteContent]:
        return self.db.get(SiteContent, self.ROW_ID)

    def save(self, data: dict) -> SiteContent:
        row = self.get()
        if row is None:
            row = SiteContent(id=self.ROW_ID, data=data)
            self.db.add(row)
        else:
            # reassign so the JSON column is marked dirty
            row.data = dict(data)
        self.db.flush()
        return row


class SettingRepository:
    def __init__(self, db):
        self.db = db

    def get(self, key: str, default=None):
        rec = self.db.get(AppSetting, key)
        return default if rec is None else rec.value

    def set(self, key: str, value) -> AppSetting:
        rec = self.db.get(AppSetting, key)
        if rec is None:
            rec = AppSetting(key=key, value=value)
            self.db.add(rec)
        else:
            rec.value = value
        self.db.flush()
        return rec
