from multiblog.crud.blog import (
    blog_crud, author_crud, category_crud, tag_crud, post_crud, comment_crud
)

__all__ = [
    "blog_crud",
    "author_crud",
    "category_crud",
    "tag_crud",
    "post_crud",
    "comment_crud",
]
