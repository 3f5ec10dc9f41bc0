import pytest
from pydantic import ValidationError
from datetime import datetime

from multiblog.schemas.blog import (
    BlogCreate, BlogRead, AuthorCreate, PostCreate, PostDetail,
    TagRead, TagSummary, CommentCreate
)
from multiblog.schemas.simple import SimplePostRequest

class TestBlogCreate:
    def test_blog_create_pascal_case(self):
        blog = BlogCreate.model_validate({
            "Name": "Tech Thoughts",
            "Slug": "tech-thoughts",
            "Url": "https://tech.example.com"
        })
        assert blog.name == "Tech Thoughts"
        assert blog.slug == "tech-thoughts"
        assert blog.description is None

    def test_blog_create_snake_case(self):
        blog = BlogCreate(name="Tech Thoughts", slug="tech-thoughts")
        assert blog.url is None

    def test_blog_create_blank_name(self):
        with pytest.raises(ValidationError) as exc_info:
            BlogCreate(name="   ", slug="tech-thoughts")
        assert "Name is required" in str(exc_info.value)

    def test_blog_create_missing_slug(self):
        with pytest.raises(ValidationError):
            BlogCreate(name="Tech Thoughts")

class TestBlogRead:
    def test_blog_read_dumps_wire_names(self):
        now = datetime.now()
        blog = BlogRead(id=1, name="Tech Thoughts", slug="tech-thoughts", created_at=now)
        data = blog.model_dump(by_alias=True)
        assert data["BlogId"] == 1
        assert data["Name"] == "Tech Thoughts"
        assert data["CreatedAt"] == now

class TestAuthorCreate:
    def test_author_create_requires_positive_blog(self):
        with pytest.raises(ValidationError):
            AuthorCreate(blog_id=0, name="Ava Martin")

    def test_author_create_profile_url_alias(self):
        author = AuthorCreate.model_validate({
            "BlogId": 1,
            "Name": "Ava Martin",
            "ProfileUrl": "https://tech.example.com/authors/ava"
        })
        assert author.profile_url == "https://tech.example.com/authors/ava"

class TestPostCreate:
    def test_post_create_defaults(self):
        post = PostCreate(blog_id=1, title="Hello", slug="hello")
        assert post.is_published == 0
        assert post.views == 0
        assert post.tags is None

    def test_post_create_tags_key(self):
        post = PostCreate.model_validate({
            "BlogId": 1, "Title": "Hello", "Slug": "hello", "tags": [2, 3]
        })
        assert post.tags == [2, 3]

    def test_post_create_is_published_range(self):
        with pytest.raises(ValidationError):
            PostCreate(blog_id=1, title="Hello", slug="hello", is_published=2)

    def test_post_create_negative_views(self):
        with pytest.raises(ValidationError):
            PostCreate(blog_id=1, title="Hello", slug="hello", views=-1)

    def test_post_create_blank_title(self):
        with pytest.raises(ValidationError) as exc_info:
            PostCreate(blog_id=1, title="", slug="hello")
        assert "Title is required" in str(exc_info.value)

class TestPostDetail:
    def test_post_detail_tags(self):
        now = datetime.now()
        post = PostDetail(
            id=5, blog_id=1, title="Hello", slug="hello", created_at=now,
            tags=[TagSummary(id=1, name="sql")]
        )
        data = post.model_dump(by_alias=True)
        assert data["PostId"] == 5
        assert data["tags"] == [{"TagId": 1, "Name": "sql"}]

class TestTagRead:
    def test_tag_read_post_count(self):
        tag = TagRead(id=1, name="sql")
        assert tag.model_dump(by_alias=True) == {"TagId": 1, "Name": "sql", "PostCount": 0}

class TestCommentCreate:
    def test_comment_create_requires_content(self):
        with pytest.raises(ValidationError) as exc_info:
            CommentCreate(post_id=1, content=" ")
        assert "Content is required" in str(exc_info.value)

    def test_comment_create_is_approved_default(self):
        comment = CommentCreate(post_id=1, content="Nice post")
        assert comment.is_approved == 0

class TestSimplePostRequest:
    def test_simple_request_camel_case(self):
        request = SimplePostRequest.model_validate({
            "blogUrl": "https://myblog.com",
            "postTexts": ["Hello world."]
        })
        assert request.blog_url == "https://myblog.com"
        assert request.post_texts == ["Hello world."]

    def test_simple_request_blank_url(self):
        with pytest.raises(ValidationError) as exc_info:
            SimplePostRequest(blog_url="  ", post_texts=["Hello"])
        assert "blogUrl is required" in str(exc_info.value)

    def test_simple_request_empty_texts(self):
        with pytest.raises(ValidationError) as exc_info:
            SimplePostRequest(blog_url="https://myblog.com", post_texts=[])
        assert "At least one post text is required" in str(exc_info.value)
