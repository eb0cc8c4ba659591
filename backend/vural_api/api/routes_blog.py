from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from vural_api.api.deps import get_current_user, require_admin
from vural_api.db import get_db
from vural_api.models.customer import Customer
from vural_api.schemas.blog_schema import BlogPostIn, BlogPostOut, BlogPostUpdate, CommentIn, CommentOut
from vural_api.services.blog_service import BlogService

router = APIRouter(prefix="/blog", tags=["blog"])


@router.get("", summary="List blog posts")
def list_posts(category: Optional[str] = None, db: Session = Depends(get_db)):
    return [BlogPostOut.model_validate(p).to_json() for p in BlogService(db).list_posts(category)]


@router.get("/{id_or_slug}", summary="Get a blog post by id or slug")
def get_post(id_or_slug: str, db: Session = Depends(get_db)):
    return BlogPostOut.model_validate(BlogService(db).get_post(id_or_slug)).to_json()


@router.post("", status_code=201, summary="Create blog post")
def create_post(payload: BlogPostIn, db: Session = Depends(get_db), _=Depends(require_admin)):
    post = BlogService(db).add_post(payload.model_dump())
    return BlogPostOut.model_validate(post).to_json()


@router.put("/{id_or_slug}", summary="Update blog post")
def update_post(
    id_or_slug: str, payload: BlogPostUpdate, db: Session = Depends(get_db), _=Depends(require_admin)
):
    post = BlogService(db).update_post(id_or_slug, payload.changes())
    return BlogPostOut.model_validate(post).to_json()


@router.delete("/{id_or_slug}", summary="Delete blog post and its comments")
def delete_post(id_or_slug: str, db: Session = Depends(get_db), _=Depends(require_admin)):
    BlogService(db).delete_post(id_or_slug)
    return {"success": True}


@router.post("/{id_or_slug}/comments", status_code=201, summary="Comment on a post")
def add_comment(
    id_or_slug: str,
    payload: CommentIn,
    user: Customer = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    comment = BlogService(db).add_comment(id_or_slug, user, payload.content)
    return CommentOut.model_validate(comment).to_json()


@router.delete("/{id_or_slug}/comments/{comment_id}", summary="Delete a comment (author or admin)")
def delete_comment(
    id_or_slug: str,
    comment_id: str,
    user: Customer = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    BlogService(db).delete_comment(id_or_slug, comment_id, user)
    return {"success": True}


@router.post("/{id_or_slug}/like", summary="Like a post")
def like_post(id_or_slug: str, db: Session = Depends(get_db)):
    return {"likes": BlogService(db).like(id_or_slug)}
