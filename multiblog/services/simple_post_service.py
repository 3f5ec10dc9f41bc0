# multiblog/services/simple_post_service.py
"""
Simple-post ingestion.

Turns a blog URL plus raw text blocks into published posts, creating the
blog, a default author and a default category on first use. Every insert
commits on its own: a failure part-way leaves earlier rows in place, and a
retried batch creates its posts again.
"""
import logging
import re
import time
from typing import List
from urllib.parse import urlparse

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from multiblog.crud.blog import (
    BlogCRUD, AuthorCRUD, CategoryCRUD, PostCRUD,
    blog_crud, author_crud, category_crud, post_crud
)
from multiblog.models.blog import Blog, Author, Category, utc_now
from multiblog.schemas.blog import PostRead
from multiblog.schemas.simple import SimplePostRequest, SimplePostResponse

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 50
EXCERPT_MAX_LENGTH = 150
ELLIPSIS = "..."

DEFAULT_AUTHOR_NAME = "Default Author"
DEFAULT_AUTHOR_BIO = "Auto-created default author"
DEFAULT_CATEGORY_NAME = "General"
DEFAULT_CATEGORY_SLUG = "general"


HOSTNAME_PATTERN = re.compile(r"[a-z0-9_.-]+|[0-9a-f:.]+")


# ============ Derivation helpers ============

def blog_hostname(blog_url: str) -> str:
    """
    Hostname of ``blog_url``.

    Raises ValueError for anything that is not an absolute URL with a
    well-formed host: no scheme, no host, illegal host characters, or a
    port that is not a number in range.
    """
    parsed = urlparse(blog_url.strip())
    hostname = parsed.hostname
    if not parsed.scheme or not hostname:
        raise ValueError(f"Invalid blog URL: {blog_url!r}")

    # Internationalized hosts are checked in their ASCII form
    ascii_hostname = hostname.encode("idna").decode("ascii")
    if not HOSTNAME_PATTERN.fullmatch(ascii_hostname):
        raise ValueError(f"Invalid host in blog URL: {blog_url!r}")

    parsed.port  # raises ValueError when the port is malformed
    return hostname


def derive_blog_name(hostname: str) -> str:
    """'www.myblog.com' -> 'Myblog'."""
    name = hostname[4:] if hostname.startswith("www.") else hostname
    name = re.sub(r"\.[^/.]+$", "", name)
    return name[:1].upper() + name[1:]


def derive_blog_slug(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.lower())


def derive_title(text: str, index: int) -> str:
    """
    Title from the first sentence of ``text``.

    Args:
        text: Trimmed post text
        index: 0-based position in the request, used for the fallback title

    Returns:
        At most 50 characters of the first sentence ("..." appended when the
        cut lands exactly on the limit), or "Post {index + 1}" if empty.
    """
    title = re.split(r"[.!?]", text, maxsplit=1)[0][:TITLE_MAX_LENGTH].strip()
    if len(title) == TITLE_MAX_LENGTH and not title.endswith(ELLIPSIS):
        title += ELLIPSIS
    if not title:
        title = f"Post {index + 1}"
    return title


def derive_post_slug(title: str, index: int, timestamp_ms: int) -> str:
    """Slugify ``title`` and suffix it with the timestamp and batch index."""
    slug = title.lower()
    slug = re.sub(r"[^\w\s-]", "", slug, flags=re.ASCII)  # ASCII word characters only
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    slug = slug.strip("-")
    return f"{slug}-{timestamp_ms}-{index}"


def derive_excerpt(text: str) -> str:
    if len(text) > EXCERPT_MAX_LENGTH:
        return text[:EXCERPT_MAX_LENGTH] + ELLIPSIS
    return text


def current_millis() -> int:
    return int(time.time() * 1000)


class SimplePostService:
    """Find-or-create cascade for blog, author and category, then one post per text."""

    def __init__(
        self,
        blogs: BlogCRUD = blog_crud,
        authors: AuthorCRUD = author_crud,
        categories: CategoryCRUD = category_crud,
        posts: PostCRUD = post_crud
    ):
        self.blogs = blogs
        self.authors = authors
        self.categories = categories
        self.posts = posts

    def resolve_blog(self, db: Session, blog_url: str) -> Blog:
        """Blog whose Url equals ``blog_url`` exactly, created if missing."""
        blog = self.blogs.get_by_url(db, blog_url)
        if blog:
            return blog

        hostname = blog_hostname(blog_url)
        name = derive_blog_name(hostname)
        try:
            blog = self.blogs.insert(
                db,
                name=name,
                slug=derive_blog_slug(name),
                description=f"Auto-created blog for {hostname}",
                url=blog_url,
                created_at=utc_now()
            )
        except IntegrityError:
            # A concurrent request may have created it; the unique slug is the guard
            db.rollback()
            blog = self.blogs.get_by_url(db, blog_url)
            if blog is None:
                raise
            return blog

        logger.info(f"Created blog #{blog.id} '{blog.slug}' for {blog_url}")
        return blog

    def resolve_author(self, db: Session, blog_id: int, blog_url: str) -> Author:
        """First author of the blog, or a new default author."""
        author = self.authors.find_first(db, Author.blog_id == blog_id)
        if author:
            return author

        author = self.authors.insert(
            db,
            blog_id=blog_id,
            name=DEFAULT_AUTHOR_NAME,
            email=f"author@{blog_hostname(blog_url)}",
            bio=DEFAULT_AUTHOR_BIO,
            created_at=utc_now()
        )
        logger.info(f"Created default author #{author.id} for blog #{blog_id}")
        return author

    def resolve_category(self, db: Session, blog_id: int) -> Category:
        """First category of the blog, or a new "General" category."""
        category = self.categories.find_first(db, Category.blog_id == blog_id)
        if category:
            return category

        category = self.categories.insert(
            db,
            blog_id=blog_id,
            name=DEFAULT_CATEGORY_NAME,
            slug=DEFAULT_CATEGORY_SLUG
        )
        logger.info(f"Created default category #{category.id} for blog #{blog_id}")
        return category

    def create_post(
        self,
        db: Session,
        blog_id: int,
        author_id: int,
        category_id: int,
        text: str,
        index: int
    ) -> PostRead:
        title = derive_title(text, index)
        now = utc_now()
        post = self.posts.insert(
            db,
            blog_id=blog_id,
            author_id=author_id,
            category_id=category_id,
            title=title,
            slug=derive_post_slug(title, index, current_millis()),
            content=text,
            excerpt=derive_excerpt(text),
            published_at=now,
            is_published=1,
            views=0,
            created_at=now,
            updated_at=now
        )
        return self.posts.read(db, post.id)

    def create_simple_posts(self, db: Session, request: SimplePostRequest) -> SimplePostResponse:
        """
        Create one published post per non-blank text.

        1. Resolve or create the blog for ``request.blog_url``
        2. Resolve or create its default author and category
        3. Insert the posts in input order, skipping blank texts

        Raises whatever the store raises; rows written before the failure
        are kept.
        """
        blog_id = self.resolve_blog(db, request.blog_url).id
        author_id = self.resolve_author(db, blog_id, request.blog_url).id
        category_id = self.resolve_category(db, blog_id).id

        created: List[PostRead] = []
        for index, raw_text in enumerate(request.post_texts):
            text = raw_text.strip()
            if not text:
                continue
            created.append(self.create_post(db, blog_id, author_id, category_id, text, index))

        logger.info(f"Created {len(created)} post(s) for blog #{blog_id}")

        # Commits above expire the resolved rows; read them back fresh
        return SimplePostResponse(
            blog=self.blogs.read(db, blog_id),
            author=self.authors.read(db, author_id),
            category=self.categories.read(db, category_id),
            posts_created=len(created),
            posts=created
        )


# Singleton instance
simple_post_service = SimplePostService()
