from multiblog.routers import blogs, authors, categories, posts, tags, comments, simple

__all__ = [
    "blogs",
    "authors",
    "categories",
    "posts",
    "tags",
    "comments",
    "simple",
]
