import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool
from datetime import datetime, timezone

from multiblog.main import app
from multiblog.database.engine import get_db, enable_sqlite_foreign_keys
from multiblog.models.blog import Blog, Author, Category, Post, Tag, PostTag, Comment

# Test database setup
@pytest.fixture(name="session")
def session_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    enable_sqlite_foreign_keys(engine)
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session

@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        return session

    app.dependency_overrides[get_db] = get_session_override
    client = TestClient(app, raise_server_exceptions=False)
    yield client
    app.dependency_overrides.clear()

@pytest.fixture(name="blog")
def blog_fixture(session: Session):
    blog = Blog(
        name="Tech Thoughts",
        slug="tech-thoughts",
        description="Personal essays on software",
        url="https://tech.example.com",
        created_at=datetime(2022, 1, 1, tzinfo=timezone.utc)
    )
    session.add(blog)
    session.commit()
    session.refresh(blog)
    return blog

@pytest.fixture(name="author")
def author_fixture(session: Session, blog: Blog):
    author = Author(blog_id=blog.id, name="Ava Martin", email="ava@tech.example.com")
    session.add(author)
    session.commit()
    session.refresh(author)
    return author

@pytest.fixture(name="category")
def category_fixture(session: Session, blog: Blog):
    category = Category(blog_id=blog.id, name="Programming", slug="programming")
    session.add(category)
    session.commit()
    session.refresh(category)
    return category

@pytest.fixture(name="tags")
def tags_fixture(session: Session):
    sql = Tag(name="sql")
    devops = Tag(name="devops")
    session.add(sql)
    session.add(devops)
    session.commit()
    session.refresh(sql)
    session.refresh(devops)
    return {"sql": sql, "devops": devops}

@pytest.fixture(name="post")
def post_fixture(session: Session, blog: Blog, author: Author, category: Category, tags):
    post = Post(
        blog_id=blog.id,
        author_id=author.id,
        category_id=category.id,
        title="Designing Resilient Databases",
        slug="designing-resilient-databases",
        content="A short guide on transactional design, backups, and sharding strategies.",
        excerpt="Resilient DB design fundamentals.",
        published_at=datetime(2022, 7, 15, 9, 0, tzinfo=timezone.utc),
        is_published=1,
        views=1245
    )
    session.add(post)
    session.commit()
    session.refresh(post)

    session.add(PostTag(post_id=post.id, tag_id=tags["sql"].id))
    session.commit()
    return post

@pytest.fixture(name="comment")
def comment_fixture(session: Session, post: Post):
    comment = Comment(
        post_id=post.id,
        author_name="Jane Doe",
        author_email="jane@example.com",
        content="Great overview, helped me redesign our backup plan.",
        is_approved=1
    )
    session.add(comment)
    session.commit()
    session.refresh(comment)
    return comment
