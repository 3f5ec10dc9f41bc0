# Import all models to ensure they are registered with SQLModel
from multiblog.models.blog import Blog, Author, Category, Post, Tag, PostTag, Comment

__all__ = [
    "Blog",
    "Author",
    "Category",
    "Post",
    "Tag",
    "PostTag",
    "Comment",
]
