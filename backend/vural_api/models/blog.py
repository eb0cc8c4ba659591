from datetime import date, datetime, timezone

from sqlalchemy import JSON, Column, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from vural_api.db import Base


class BlogPost(Base):
    __tablename__ = "blog_posts"
    id = Column(String(32), primary_key=True, index=True)
    title = Column(String(256), nullable=False)
    excerpt = Column(Text, nullable=True)
    content = Column(Text, nullable=False)
    author = Column(String(128), nullable=False)
    date = Column(Date, default=date.today, nullable=False)
    image_url = Column(String(512), nullable=True)
    slug = Column(String(256), unique=True, index=True, nullable=False)
    category = Column(String(128), nullable=True)
    tags = Column(JSON, nullable=False, default=list)
    likes = Column(Integer, nullable=False, default=0)

    comments = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="Comment.date",
    )


class Comment(Base):
    __tablename__ = "comments"
    id = Column(String(32), primary_key=True, index=True)
    post_id = Column(String(32), ForeignKey("blog_posts.id"), nullable=False, index=True)
    user_id = Column(String(32), nullable=False)
    user_name = Column(String(128), nullable=False)
    user_avatar = Column(String(512), nullable=True)
    content = Column(Text, nullable=False)
    date = Column(DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)
    status = Column(String(16), default="approved", nullable=False)  # approved, pending, spam

    post = relationship("BlogPost", back_populates="comments")
