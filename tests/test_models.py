import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from multiblog.models.blog import Blog, Author, Category, Post, Tag, PostTag, Comment

class TestBlogModel:
    def test_create_blog(self, session: Session):
        blog = Blog(name="Travel Diaries", slug="travel-diaries", url="https://travel.example.com")

        session.add(blog)
        session.commit()
        session.refresh(blog)

        assert blog.id is not None
        assert blog.name == "Travel Diaries"
        assert blog.description is None
        assert blog.created_at is not None

    def test_blog_slug_unique(self, session: Session, blog: Blog):
        duplicate = Blog(name="Other", slug=blog.slug)
        session.add(duplicate)

        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()

    def test_delete_blog_cascades(self, session: Session, blog: Blog, comment: Comment):
        session.delete(blog)
        session.commit()

        assert session.exec(select(Author)).all() == []
        assert session.exec(select(Category)).all() == []
        assert session.exec(select(Post)).all() == []
        assert session.exec(select(PostTag)).all() == []
        assert session.exec(select(Comment)).all() == []
        # Tags are global and survive
        assert len(session.exec(select(Tag)).all()) == 2

class TestAuthorModel:
    def test_author_requires_existing_blog(self, session: Session):
        session.add(Author(blog_id=999, name="Nobody"))

        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()

    def test_delete_author_clears_post_reference(self, session: Session, author: Author, post: Post):
        post_id = post.id
        session.delete(author)
        session.commit()

        reloaded = session.get(Post, post_id)
        assert reloaded is not None
        assert reloaded.author_id is None

class TestPostModel:
    def test_post_defaults(self, session: Session, blog: Blog):
        post = Post(blog_id=blog.id, title="Draft", slug="draft")
        session.add(post)
        session.commit()
        session.refresh(post)

        assert post.is_published == 0
        assert post.views == 0
        assert post.published_at is None
        assert post.updated_at is None
        assert post.author_id is None

    def test_delete_post_removes_tags_and_comments(self, session: Session, post: Post, comment: Comment):
        session.delete(post)
        session.commit()

        assert session.exec(select(PostTag)).all() == []
        assert session.exec(select(Comment)).all() == []
        assert len(session.exec(select(Tag)).all()) == 2

class TestTagModel:
    def test_tag_name_unique(self, session: Session, tags):
        session.add(Tag(name="sql"))

        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()

    def test_delete_tag_keeps_posts(self, session: Session, post: Post, tags):
        session.delete(tags["sql"])
        session.commit()

        assert session.exec(select(PostTag)).all() == []
        assert session.get(Post, post.id) is not None
