import re
import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, select

from multiblog.models.blog import Blog, Author, Category, Post
from multiblog.services.simple_post_service import (
    simple_post_service, derive_blog_name, derive_blog_slug, derive_title,
    derive_post_slug, derive_excerpt, blog_hostname
)

class TestDerivationHelpers:
    def test_blog_hostname(self):
        assert blog_hostname("https://www.myblog.com/posts?x=1") == "www.myblog.com"

    def test_blog_hostname_missing(self):
        with pytest.raises(ValueError):
            blog_hostname("not a url")

    def test_blog_hostname_malformed(self):
        for url in ("http://exa mple.com", "https://myblog.com:abc", "https://myblog.com:70000", "http://my_blog!.com"):
            with pytest.raises(ValueError):
                blog_hostname(url)

    def test_blog_hostname_with_port(self):
        assert blog_hostname("http://localhost:8080/blog") == "localhost"

    def test_derive_blog_name(self):
        assert derive_blog_name("www.myblog.com") == "Myblog"
        assert derive_blog_name("tech.example.com") == "Tech.example"
        assert derive_blog_name("localhost") == "Localhost"

    def test_derive_blog_slug(self):
        assert derive_blog_slug("Myblog") == "myblog"
        assert derive_blog_slug("Food & Recipes") == "food-recipes"
        assert derive_blog_slug("Tech.example") == "tech-example"

    def test_derive_title_first_sentence(self):
        assert derive_title("Hello world. More text here.", 0) == "Hello world"
        assert derive_title("Why? Because.", 0) == "Why"
        assert derive_title("Wow! Amazing", 0) == "Wow"

    def test_derive_title_truncated(self):
        title = derive_title("x" * 60 + ". Tail", 0)
        assert title == "x" * 50 + "..."

    def test_derive_title_just_under_limit(self):
        assert derive_title("y" * 49, 0) == "y" * 49

    def test_derive_title_fallback(self):
        assert derive_title("...", 0) == "Post 1"
        assert derive_title("!", 4) == "Post 5"

    def test_derive_post_slug(self):
        assert derive_post_slug("Hello, World!", 0, 1700000000000) == "hello-world-1700000000000-0"
        assert derive_post_slug("  A -- B  ", 3, 5) == "a-b-5-3"

    def test_derive_post_slug_drops_non_ascii(self):
        assert derive_post_slug("Café résumé", 0, 7) == "caf-rsum-7-0"

    def test_derive_excerpt(self):
        assert derive_excerpt("short text") == "short text"
        assert derive_excerpt("z" * 150) == "z" * 150
        assert derive_excerpt("z" * 151) == "z" * 150 + "..."

class TestSimplePostRoute:
    def test_creates_blog_author_category_and_posts(self, client: TestClient):
        response = client.post("/api/simple", json={
            "blogUrl": "https://www.myblog.com",
            "postTexts": ["Hello world. More text here.", "   ", "Second post!"]
        })

        assert response.status_code == 200
        data = response.json()

        assert data["blog"]["Name"] == "Myblog"
        assert data["blog"]["Slug"] == "myblog"
        assert data["blog"]["Url"] == "https://www.myblog.com"
        assert data["blog"]["Description"] == "Auto-created blog for www.myblog.com"

        assert data["author"]["Name"] == "Default Author"
        assert data["author"]["Email"] == "author@www.myblog.com"
        assert data["author"]["Bio"] == "Auto-created default author"
        assert data["author"]["BlogName"] == "Myblog"

        assert data["category"]["Name"] == "General"
        assert data["category"]["Slug"] == "general"

        assert data["postsCreated"] == 2
        first, second = data["posts"]
        assert first["Title"] == "Hello world"
        assert first["Content"] == "Hello world. More text here."
        assert first["Excerpt"] == "Hello world. More text here."
        assert first["IsPublished"] == 1
        assert first["Views"] == 0
        assert first["PublishedAt"] is not None
        assert first["ExternalId"] is None
        assert first["BlogName"] == "Myblog"
        assert first["AuthorName"] == "Default Author"
        assert first["CategoryName"] == "General"
        assert re.fullmatch(r"hello-world-\d+-0", first["Slug"])

        # Index follows the input position, blanks included
        assert second["Title"] == "Second post"
        assert re.fullmatch(r"second-post-\d+-2", second["Slug"])

    def test_reuses_existing_blog(self, client: TestClient):
        payload = {"blogUrl": "https://myblog.com", "postTexts": ["One."]}
        first = client.post("/api/simple", json=payload).json()
        second = client.post("/api/simple", json=payload).json()

        assert second["blog"]["BlogId"] == first["blog"]["BlogId"]
        assert second["author"]["AuthorId"] == first["author"]["AuthorId"]
        assert second["category"]["CategoryId"] == first["category"]["CategoryId"]
        assert second["posts"][0]["PostId"] != first["posts"][0]["PostId"]

        blogs = client.get("/api/blogs").json()
        assert len(blogs) == 1
        assert len(client.get("/api/posts").json()) == 2

    def test_uses_first_author_and_category_of_existing_blog(
        self, client: TestClient, blog: Blog, author: Author, category: Category
    ):
        response = client.post("/api/simple", json={
            "blogUrl": blog.url,
            "postTexts": ["Notes on indexing"]
        })

        assert response.status_code == 200
        data = response.json()
        assert data["blog"]["BlogId"] == blog.id
        assert data["author"]["Name"] == "Ava Martin"
        assert data["category"]["Name"] == "Programming"
        assert data["posts"][0]["AuthorName"] == "Ava Martin"

    def test_url_match_is_exact(self, client: TestClient, blog: Blog):
        response = client.post("/api/simple", json={
            "blogUrl": blog.url + "/",
            "postTexts": ["Trailing slash"]
        })

        assert response.status_code == 200
        assert response.json()["blog"]["BlogId"] != blog.id

    def test_long_text_title_and_excerpt(self, client: TestClient):
        text = "a" * 200
        response = client.post("/api/simple", json={
            "blogUrl": "https://long.example.com",
            "postTexts": [text]
        })

        post = response.json()["posts"][0]
        assert post["Title"] == "a" * 50 + "..."
        assert post["Excerpt"] == "a" * 150 + "..."
        assert post["Content"] == text

    def test_texts_are_trimmed(self, client: TestClient):
        response = client.post("/api/simple", json={
            "blogUrl": "https://trim.example.com",
            "postTexts": ["   .Leading punctuation  "]
        })

        post = response.json()["posts"][0]
        assert post["Title"] == "Post 1"
        assert post["Content"] == ".Leading punctuation"

    def test_all_blank_texts(self, client: TestClient, session: Session):
        response = client.post("/api/simple", json={
            "blogUrl": "https://quiet.example.com",
            "postTexts": ["", "  "]
        })

        assert response.status_code == 200
        data = response.json()
        assert data["postsCreated"] == 0
        assert data["posts"] == []
        assert session.exec(select(Blog).where(Blog.url == "https://quiet.example.com")).first() is not None

    def test_missing_blog_url(self, client: TestClient):
        response = client.post("/api/simple", json={"postTexts": ["Hello"]})
        assert response.status_code == 400
        assert response.json() == {"error": "blogUrl is required"}

    def test_empty_post_texts(self, client: TestClient):
        response = client.post("/api/simple", json={"blogUrl": "https://myblog.com", "postTexts": []})
        assert response.status_code == 400
        assert response.json() == {"error": "At least one post text is required"}

    def test_url_without_hostname(self, client: TestClient, session: Session):
        response = client.post("/api/simple", json={"blogUrl": "myblog", "postTexts": ["Hello"]})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to create posts"}
        assert session.exec(select(Blog)).all() == []

    def test_malformed_urls_create_nothing(self, client: TestClient, session: Session):
        for url in ("http://exa mple.com", "https://myblog.com:abc", "http://my_blog!.com"):
            response = client.post("/api/simple", json={"blogUrl": url, "postTexts": ["Hello"]})

            assert response.status_code == 500
            assert response.json() == {"error": "Failed to create posts"}

        assert session.exec(select(Blog)).all() == []
        assert session.exec(select(Post)).all() == []

    def test_accented_text_slug(self, client: TestClient):
        response = client.post("/api/simple", json={
            "blogUrl": "https://cafe.example.com",
            "postTexts": ["Café résumé. More"]
        })

        post = response.json()["posts"][0]
        assert post["Title"] == "Café résumé"
        assert re.fullmatch(r"caf-rsum-\d+-0", post["Slug"])

    def test_failure_keeps_earlier_writes(self, client: TestClient, session: Session, monkeypatch):
        original = simple_post_service.create_post
        calls = []

        def failing_create_post(db, blog_id, author_id, category_id, text, index):
            calls.append(index)
            if len(calls) == 2:
                raise RuntimeError("disk full")
            return original(db, blog_id, author_id, category_id, text, index)

        monkeypatch.setattr(simple_post_service, "create_post", failing_create_post)

        response = client.post("/api/simple", json={
            "blogUrl": "https://partial.example.com",
            "postTexts": ["First.", "Second.", "Third."]
        })

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to create posts"}
        assert "disk full" not in response.text
        assert len(session.exec(select(Post)).all()) == 1
        assert len(session.exec(select(Blog)).all()) == 1
