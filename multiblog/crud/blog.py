# multiblog/crud/blog.py
from sqlmodel import Session, select, func, or_
from typing import Any, Dict, List, Optional

from multiblog.core.errors import ConflictError
from multiblog.crud.base import CRUDBase
from multiblog.models.blog import (
    Blog, Author, Category, Post, Tag, PostTag, Comment, utc_now
)
from multiblog.schemas.blog import (
    BlogCreate, BlogRead, AuthorCreate, AuthorRead, CategoryCreate, CategoryRead,
    PostCreate, PostRead, PostDetail, TagCreate, TagRead, TagSummary,
    CommentCreate, CommentRead
)


# ============ Blog Operations ============

class BlogCRUD(CRUDBase[Blog, BlogCreate, BlogRead]):
    def __init__(self):
        super().__init__(Blog, BlogRead, "Blog", order_by=(Blog.created_at.desc(), Blog.id.desc()))

    def validate(self, db: Session, data: BlogCreate, current: Optional[Blog] = None) -> None:
        query = select(Blog.id).where(Blog.slug == data.slug)
        if current is not None:
            query = query.where(Blog.id != current.id)
        if db.exec(query).first() is not None:
            raise ConflictError("Blog with this slug already exists")

    def get_by_url(self, db: Session, url: str) -> Optional[Blog]:
        """Exact match on Url, oldest blog first."""
        return self.find_first(db, Blog.url == url)


# ============ Author Operations ============

class AuthorCRUD(CRUDBase[Author, AuthorCreate, AuthorRead]):
    def __init__(self):
        super().__init__(Author, AuthorRead, "Author", order_by=(Author.created_at.desc(), Author.id.desc()))

    def enriched_select(self):
        return (
            select(Author, Blog.name.label("blog_name"))
            .outerjoin(Blog, Author.blog_id == Blog.id)
        )

    def to_read(self, row: Any) -> AuthorRead:
        author, blog_name = row
        return AuthorRead(**author.model_dump(), blog_name=blog_name)

    def validate(self, db: Session, data: AuthorCreate, current: Optional[Author] = None) -> None:
        self.require(db, Blog, data.blog_id, "Blog")


# ============ Category Operations ============

class CategoryCRUD(CRUDBase[Category, CategoryCreate, CategoryRead]):
    def __init__(self):
        super().__init__(Category, CategoryRead, "Category", order_by=(Category.name, Category.id))

    def enriched_select(self):
        return (
            select(Category, Blog.name.label("blog_name"))
            .outerjoin(Blog, Category.blog_id == Blog.id)
        )

    def to_read(self, row: Any) -> CategoryRead:
        category, blog_name = row
        return CategoryRead(**category.model_dump(), blog_name=blog_name)

    def validate(self, db: Session, data: CategoryCreate, current: Optional[Category] = None) -> None:
        self.require(db, Blog, data.blog_id, "Blog")


# ============ Tag Operations ============

class TagCRUD(CRUDBase[Tag, TagCreate, TagRead]):
    def __init__(self):
        super().__init__(Tag, TagRead, "Tag", order_by=(Tag.name,))

    def enriched_select(self):
        return (
            select(Tag, func.count(PostTag.post_id).label("post_count"))
            .outerjoin(PostTag, PostTag.tag_id == Tag.id)
            .group_by(Tag.id)
        )

    def to_read(self, row: Any) -> TagRead:
        tag, post_count = row
        return TagRead(**tag.model_dump(), post_count=post_count or 0)

    def validate(self, db: Session, data: TagCreate, current: Optional[Tag] = None) -> None:
        # Case-sensitive, matching the store's unique constraint
        query = select(Tag.id).where(Tag.name == data.name)
        if current is not None:
            query = query.where(Tag.id != current.id)
        if db.exec(query).first() is not None:
            raise ConflictError("Tag with this name already exists")

    def get_post_tags(self, db: Session, post_id: int) -> List[TagSummary]:
        """Tags attached to a post, alphabetical."""
        query = (
            select(Tag)
            .join(PostTag, PostTag.tag_id == Tag.id)
            .where(PostTag.post_id == post_id)
            .order_by(Tag.name)
        )
        return [TagSummary(**tag.model_dump()) for tag in db.exec(query).all()]


# ============ Post Operations ============

class PostCRUD(CRUDBase[Post, PostCreate, PostRead]):
    def __init__(self):
        super().__init__(Post, PostRead, "Post", order_by=(Post.created_at.desc(), Post.id.desc()))

    def enriched_select(self):
        return (
            select(
                Post,
                Blog.name.label("blog_name"),
                Author.name.label("author_name"),
                Category.name.label("category_name"),
            )
            .outerjoin(Blog, Post.blog_id == Blog.id)
            .outerjoin(Author, Post.author_id == Author.id)
            .outerjoin(Category, Post.category_id == Category.id)
        )

    def to_read(self, row: Any) -> PostRead:
        post, blog_name, author_name, category_name = row
        return PostRead(
            **post.model_dump(),
            blog_name=blog_name,
            author_name=author_name,
            category_name=category_name
        )

    def read_detail(self, db: Session, post_id: int) -> PostDetail:
        """Enriched post plus its tags."""
        post = self.read(db, post_id)
        return PostDetail(
            **post.model_dump(),
            tags=tag_crud.get_post_tags(db, post_id)
        )

    def validate(self, db: Session, data: PostCreate, current: Optional[Post] = None) -> None:
        self.require(db, Blog, data.blog_id, "Blog")
        if data.author_id is not None:
            self.require(db, Author, data.author_id, "Author")
        if data.category_id is not None:
            self.require(db, Category, data.category_id, "Category")
        for tag_id in data.tags or []:
            self.require(db, Tag, tag_id, "Tag")

    def values_for_create(self, data: PostCreate) -> Dict[str, Any]:
        values = data.model_dump(exclude={"tags"})
        values["created_at"] = utc_now()
        if values["is_published"] and not values["published_at"]:
            values["published_at"] = values["created_at"]
        return values

    def values_for_update(self, data: PostCreate, current: Post) -> Dict[str, Any]:
        values = data.model_dump(exclude={"tags"})
        values["updated_at"] = utc_now()
        if values["is_published"] and not values["published_at"]:
            # Keep the original publication time across republishing edits
            values["published_at"] = current.published_at or values["updated_at"]
        return values

    def create(self, db: Session, data: PostCreate) -> Post:
        post = super().create(db, data)
        if data.tags:
            self.set_tags(db, post.id, data.tags)
        return post

    def update(self, db: Session, id: int, data: PostCreate) -> Post:
        post = super().update(db, id, data)
        if data.tags is not None:
            self.set_tags(db, post.id, data.tags)
        return post

    def set_tags(self, db: Session, post_id: int, tag_ids: List[int]) -> None:
        """Replace the post's tag associations with ``tag_ids``."""
        for post_tag in db.exec(select(PostTag).where(PostTag.post_id == post_id)).all():
            db.delete(post_tag)
        db.commit()

        # dict.fromkeys drops duplicate ids but keeps order
        for tag_id in dict.fromkeys(tag_ids):
            db.add(PostTag(post_id=post_id, tag_id=tag_id))
        db.commit()

    def list_posts(
        self,
        db: Session,
        blog_id: Optional[int] = None,
        author_id: Optional[int] = None,
        category_id: Optional[int] = None,
        published: Optional[bool] = None,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 50
    ) -> List[PostRead]:
        """Get posts with filtering options."""
        conditions = []

        if blog_id is not None:
            conditions.append(Post.blog_id == blog_id)

        if author_id is not None:
            conditions.append(Post.author_id == author_id)

        if category_id is not None:
            conditions.append(Post.category_id == category_id)

        if published is not None:
            conditions.append(Post.is_published == (1 if published else 0))

        if search:
            search_pattern = f"%{search}%"
            conditions.append(
                or_(
                    Post.title.ilike(search_pattern),
                    Post.content.ilike(search_pattern),
                    Post.excerpt.ilike(search_pattern)
                )
            )

        return self.list(db, *conditions, skip=skip, limit=limit)


# ============ Comment Operations ============

class CommentCRUD(CRUDBase[Comment, CommentCreate, CommentRead]):
    def __init__(self):
        super().__init__(Comment, CommentRead, "Comment", order_by=(Comment.created_at.desc(), Comment.id.desc()))

    def enriched_select(self):
        return (
            select(Comment, Post.title.label("post_title"), Post.slug.label("post_slug"))
            .outerjoin(Post, Comment.post_id == Post.id)
        )

    def to_read(self, row: Any) -> CommentRead:
        comment, post_title, post_slug = row
        return CommentRead(**comment.model_dump(), post_title=post_title, post_slug=post_slug)

    def validate(self, db: Session, data: CommentCreate, current: Optional[Comment] = None) -> None:
        self.require(db, Post, data.post_id, "Post")

    def list_comments(
        self,
        db: Session,
        post_id: Optional[int] = None,
        approved: Optional[bool] = None,
        skip: int = 0,
        limit: int = 50
    ) -> List[CommentRead]:
        """Get comments with filtering options."""
        conditions = []

        if post_id is not None:
            conditions.append(Comment.post_id == post_id)

        if approved is not None:
            conditions.append(Comment.is_approved == (1 if approved else 0))

        return self.list(db, *conditions, skip=skip, limit=limit)


# Create singleton instances
blog_crud = BlogCRUD()
author_crud = AuthorCRUD()
category_crud = CategoryCRUD()
tag_crud = TagCRUD()
post_crud = PostCRUD()
comment_crud = CommentCRUD()
