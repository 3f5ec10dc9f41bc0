# multiblog/schemas/simple.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import List

from multiblog.schemas.blog import BlogRead, AuthorRead, CategoryRead, PostRead


class SimplePostRequest(BaseModel):
    """Blog URL plus raw text blocks, one post per non-blank block."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    blog_url: str
    post_texts: List[str]

    @field_validator("blog_url")
    def validate_blog_url(cls, v):
        if not v or not v.strip():
            raise ValueError("blogUrl is required")
        return v

    @field_validator("post_texts")
    def validate_post_texts(cls, v):
        if len(v) == 0:
            raise ValueError("At least one post text is required")
        return v


class SimplePostResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    blog: BlogRead
    author: AuthorRead
    category: CategoryRead
    posts_created: int = Field(..., ge=0)
    posts: List[PostRead]
