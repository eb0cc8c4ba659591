from datetime import date, datetime
from typing import List, Optional

from pydantic import Field

from vural_api.schemas.common import CamelModel


class CommentOut(CamelModel):
    id: str
    post_id: str
    user_id: str
    user_name: str
    user_avatar: Optional[str] = None
    content: str
    date: datetime
    status: str


class CommentIn(CamelModel):
    content: str = Field(min_length=1, max_length=4000)


class BlogPostIn(CamelModel):
    title: str = Field(min_length=1)
    excerpt: Optional[str] = None
    content: str = Field(min_length=1)
    author: str = Field(min_length=1)
    image_url: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = []


class BlogPostUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    excerpt: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None
    image_url: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None


class BlogPostOut(CamelModel):
    id: str
    title: str
    excerpt: Optional[str] = None
    content: str
    author: str
    date: date
    image_url: Optional[str] = None
    slug: str
    category: Optional[str] = None
    tags: List[str] = []
    likes: int
    comments: List[CommentOut] = []
