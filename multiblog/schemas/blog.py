# multiblog/schemas/blog.py
from pydantic import Field, ValidationInfo, field_validator
from typing import Optional, List
from datetime import datetime

from multiblog.schemas.common import ApiModel, require_text


# Blog Schemas
class BlogCreate(ApiModel):
    name: str = Field(..., max_length=255)
    slug: str = Field(..., max_length=255)
    description: Optional[str] = None
    url: Optional[str] = Field(None, max_length=500)

    @field_validator("name", "slug")
    def validate_required(cls, v, info: ValidationInfo):
        return require_text(v, info)


class BlogRead(ApiModel):
    id: int = Field(..., alias="BlogId")
    name: str
    slug: str
    description: Optional[str] = None
    url: Optional[str] = None
    created_at: datetime


# Author Schemas
class AuthorCreate(ApiModel):
    blog_id: int = Field(..., gt=0)
    name: str = Field(..., max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    profile_url: Optional[str] = Field(None, max_length=500)
    bio: Optional[str] = None

    @field_validator("name")
    def validate_required(cls, v, info: ValidationInfo):
        return require_text(v, info)


class AuthorRead(ApiModel):
    id: int = Field(..., alias="AuthorId")
    blog_id: int
    name: str
    email: Optional[str] = None
    profile_url: Optional[str] = None
    bio: Optional[str] = None
    created_at: datetime
    blog_name: Optional[str] = None


# Category Schemas
class CategoryCreate(ApiModel):
    blog_id: int = Field(..., gt=0)
    name: str = Field(..., max_length=255)
    slug: Optional[str] = Field(None, max_length=255)

    @field_validator("name")
    def validate_required(cls, v, info: ValidationInfo):
        return require_text(v, info)


class CategoryRead(ApiModel):
    id: int = Field(..., alias="CategoryId")
    blog_id: int
    name: str
    slug: Optional[str] = None
    blog_name: Optional[str] = None


# Tag Schemas
class TagCreate(ApiModel):
    name: str = Field(..., max_length=100)

    @field_validator("name")
    def validate_required(cls, v, info: ValidationInfo):
        return require_text(v, info)


class TagSummary(ApiModel):
    """Tag as listed on a post."""
    id: int = Field(..., alias="TagId")
    name: str


class TagRead(TagSummary):
    post_count: int = 0


# Post Schemas
class PostCreate(ApiModel):
    blog_id: int = Field(..., gt=0)
    author_id: Optional[int] = Field(None, gt=0)
    category_id: Optional[int] = Field(None, gt=0)
    title: str = Field(..., max_length=500)
    slug: str = Field(..., max_length=500)
    content: Optional[str] = None
    excerpt: Optional[str] = None
    published_at: Optional[datetime] = None
    is_published: int = Field(0, ge=0, le=1)
    views: int = Field(0, ge=0)
    external_id: Optional[str] = Field(None, max_length=255)
    # TagIds; on update a present list replaces every existing association
    tags: Optional[List[int]] = Field(None, alias="tags")

    @field_validator("title", "slug")
    def validate_required(cls, v, info: ValidationInfo):
        return require_text(v, info)


class PostRead(ApiModel):
    id: int = Field(..., alias="PostId")
    blog_id: int
    author_id: Optional[int] = None
    category_id: Optional[int] = None
    title: str
    slug: str
    content: Optional[str] = None
    excerpt: Optional[str] = None
    published_at: Optional[datetime] = None
    is_published: int = 0
    views: int = 0
    external_id: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    blog_name: Optional[str] = None
    author_name: Optional[str] = None
    category_name: Optional[str] = None


class PostDetail(PostRead):
    """Single post with its tags."""
    tags: List[TagSummary] = Field(default_factory=list, alias="tags")


# Comment Schemas
class CommentCreate(ApiModel):
    post_id: int = Field(..., gt=0)
    author_name: Optional[str] = Field(None, max_length=255)
    author_email: Optional[str] = Field(None, max_length=255)
    content: str
    is_approved: int = Field(0, ge=0, le=1)
    external_id: Optional[str] = Field(None, max_length=255)

    @field_validator("content")
    def validate_required(cls, v, info: ValidationInfo):
        return require_text(v, info)


class CommentRead(ApiModel):
    id: int = Field(..., alias="CommentId")
    post_id: int
    author_name: Optional[str] = None
    author_email: Optional[str] = None
    content: str
    created_at: datetime
    is_approved: int = 0
    external_id: Optional[str] = None
    post_title: Optional[str] = None
    post_slug: Optional[str] = None
