# multiblog/routers/posts.py
from fastapi import APIRouter, Depends, Path, Query
from sqlmodel import Session
from typing import List, Optional

from multiblog.core.config import settings
from multiblog.database.engine import get_db
from multiblog.crud.blog import post_crud
from multiblog.schemas.blog import PostCreate, PostRead, PostDetail
from multiblog.schemas.common import MessageResponse

router = APIRouter(
    prefix="/posts",
    tags=["posts"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[PostRead])
def get_posts(
    blog: Optional[int] = None,
    author: Optional[int] = None,
    category: Optional[int] = None,
    published: Optional[bool] = None,
    search: Optional[str] = None,
    limit: int = Query(settings.DEFAULT_PAGE_LIMIT, ge=1, le=settings.MAX_PAGE_LIMIT),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db)
):
    """
    Get list of posts with filtering options, newest first.

    **Query Parameters**:
    - blog / author / category: Filter by owning ID
    - published: Filter by publication flag
    - search: Case-insensitive search in title, content and excerpt
    - limit / offset: Pagination
    """
    return post_crud.list_posts(
        db,
        blog_id=blog,
        author_id=author,
        category_id=category,
        published=published,
        search=search,
        skip=offset,
        limit=limit
    )


@router.get("/{post_id}", response_model=PostDetail)
def get_post(post_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    """Get a single post with blog, author and category names and its tags."""
    return post_crud.read_detail(db, post_id)


@router.post("", response_model=PostDetail)
def create_post(post_data: PostCreate, db: Session = Depends(get_db)):
    """
    Create a post.

    The blog must exist, as must the author, category and every tag in
    ``tags`` when given. PublishedAt defaults to now for published posts.
    """
    post = post_crud.create(db, post_data)
    return post_crud.read_detail(db, post.id)


@router.put("/{post_id}", response_model=PostDetail)
def update_post(
    post_data: PostCreate,
    post_id: int = Path(..., gt=0),
    db: Session = Depends(get_db)
):
    """
    Replace a post's fields.

    A ``tags`` list replaces every existing tag association; omit it to
    leave tags untouched.
    """
    post = post_crud.update(db, post_id, post_data)
    return post_crud.read_detail(db, post.id)


@router.delete("/{post_id}", response_model=MessageResponse)
def delete_post(post_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    # Tag associations and comments are removed by the store's cascade
    post_crud.delete(db, post_id)
    return MessageResponse(message="Post deleted successfully")
