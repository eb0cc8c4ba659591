import logging
from typing import List

from sqlalchemy.orm import Session

from vural_api.models.blog import BlogPost, Comment
from vural_api.models.customer import Customer
from vural_api.repositories.content_repo import BlogPostRepository, CommentRepository
from vural_api.services.errors import InvalidInput, NotFound, PermissionDenied
from vural_api.utils.text import sanitize_text, slugify

log = logging.getLogger(__name__)


class BlogService:
    def __init__(self, db: Session):
        self.db = db
        self.posts = BlogPostRepository(db)
        self.comments = CommentRepository(db)

    def list_posts(self, category: str = None) -> List[BlogPost]:
        return self.posts.list(category=category)

    def get_post(self, id_or_slug: str) -> BlogPost:
        post = self.posts.get(id_or_slug) or self.posts.get_by_slug(id_or_slug)
        if not post:
            raise NotFound("Blog post not found")
        return post

    def _unique_slug(self, title: str, exclude_id: str = None) -> str:
        base = slugify(title)
        if not base:
            raise InvalidInput("Title must contain at least one letter or digit")
        slug, n = base, 2
        while self.posts.slug_taken(slug, exclude_id=exclude_id):
            slug = f"{base}-{n}"
            n += 1
        return slug

    def add_post(self, fields: dict) -> BlogPost:
        fields["slug"] = self._unique_slug(fields["title"])
        fields["likes"] = 0
        post = self.posts.add(fields)
        self.db.commit()
        log.info("blog post created id=%s slug=%s", post.id, post.slug)
        return post

    def update_post(self, id_or_slug: str, changes: dict) -> BlogPost:
        post = self.get_post(id_or_slug)
        changes = {k: v for k, v in changes.items() if v is not None}
        if "title" in changes and changes["title"] != post.title:
            changes["slug"] = self._unique_slug(changes["title"], exclude_id=post.id)
        self.posts.update(post, changes)
        self.db.commit()
        return post

    def delete_post(self, id_or_slug: str) -> None:
        post = self.get_post(id_or_slug)
        # comments go with the post (delete-orphan cascade)
        self.posts.delete(post)
        self.db.commit()
        log.info("blog post deleted id=%s", post.id)

    def add_comment(self, id_or_slug: str, user: Customer, content: str) -> Comment:
        post = self.get_post(id_or_slug)
        text = sanitize_text(content)
        if not text:
            raise InvalidInput("Comment is empty")
        comment = self.comments.add(
            {
                "post_id": post.id,
                "user_id": user.id,
                "user_name": user.name,
                "user_avatar": user.avatar,
                "content": text,
                "status": "approved",
            }
        )
        self.db.commit()
        log.info("comment %s added to post %s by %s", comment.id, post.id, user.id)
        return comment

    def delete_comment(self, id_or_slug: str, comment_id: str, user: Customer) -> None:
        post = self.get_post(id_or_slug)
        comment = self.comments.get(comment_id)
        if not comment or comment.post_id != post.id:
            raise NotFound("Comment not found")
        if not user.is_admin and comment.user_id != user.id:
            raise PermissionDenied("Only the author or an admin can delete this comment")
        self.comments.delete(comment)
        self.db.commit()

    def like(self, id_or_slug: str) -> int:
        """Increment the like counter. There is no per-user deduplication."""
        post = self.get_post(id_or_slug)
        self.db.query(BlogPost).filter(BlogPost.id == post.id).update(
            {BlogPost.likes: BlogPost.likes + 1}, synchronize_session=False
        )
        self.db.commit()
        self.db.refresh(post)
        return post.likes
