# multiblog/models/blog.py
from sqlmodel import SQLModel, Field, Column, Text
from typing import Optional
from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Blog(SQLModel, table=True):
    __tablename__ = "blogs"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    slug: str = Field(max_length=255, unique=True, index=True)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))
    url: Optional[str] = Field(default=None, max_length=500, index=True)
    created_at: datetime = Field(default_factory=utc_now)


class Author(SQLModel, table=True):
    __tablename__ = "authors"

    id: Optional[int] = Field(default=None, primary_key=True)
    blog_id: int = Field(foreign_key="blogs.id", ondelete="CASCADE", index=True)
    name: str = Field(max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    profile_url: Optional[str] = Field(default=None, max_length=500)
    bio: Optional[str] = Field(default=None, sa_column=Column(Text))
    created_at: datetime = Field(default_factory=utc_now)


class Category(SQLModel, table=True):
    __tablename__ = "categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    blog_id: int = Field(foreign_key="blogs.id", ondelete="CASCADE", index=True)
    name: str = Field(max_length=255)
    slug: Optional[str] = Field(default=None, max_length=255)


class Post(SQLModel, table=True):
    __tablename__ = "posts"

    id: Optional[int] = Field(default=None, primary_key=True)
    blog_id: int = Field(foreign_key="blogs.id", ondelete="CASCADE", index=True)
    author_id: Optional[int] = Field(default=None, foreign_key="authors.id", ondelete="SET NULL", index=True)
    category_id: Optional[int] = Field(default=None, foreign_key="categories.id", ondelete="SET NULL", index=True)
    title: str = Field(max_length=500)
    slug: str = Field(max_length=500)
    content: Optional[str] = Field(default=None, sa_column=Column(Text))
    excerpt: Optional[str] = Field(default=None, sa_column=Column(Text))
    published_at: Optional[datetime] = Field(default=None)
    is_published: int = Field(default=0)
    views: int = Field(default=0)
    external_id: Optional[str] = Field(default=None, max_length=255)  # id in the source service, if imported
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: Optional[datetime] = Field(default=None)


class Tag(SQLModel, table=True):
    __tablename__ = "tags"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, unique=True, index=True)


class PostTag(SQLModel, table=True):
    __tablename__ = "post_tags"

    post_id: int = Field(foreign_key="posts.id", ondelete="CASCADE", primary_key=True)
    tag_id: int = Field(foreign_key="tags.id", ondelete="CASCADE", primary_key=True)


class Comment(SQLModel, table=True):
    __tablename__ = "comments"

    id: Optional[int] = Field(default=None, primary_key=True)
    post_id: int = Field(foreign_key="posts.id", ondelete="CASCADE", index=True)
    author_name: Optional[str] = Field(default=None, max_length=255)
    author_email: Optional[str] = Field(default=None, max_length=255)
    content: str = Field(sa_column=Column(Text, nullable=False))
    created_at: datetime = Field(default_factory=utc_now)
    is_approved: int = Field(default=0)
    external_id: Optional[str] = Field(default=None, max_length=255)
