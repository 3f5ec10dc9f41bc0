# multiblog/routers/comments.py
from fastapi import APIRouter, Depends, Path, Query
from sqlmodel import Session
from typing import List, Optional

from multiblog.core.config import settings
from multiblog.database.engine import get_db
from multiblog.crud.blog import comment_crud
from multiblog.schemas.blog import CommentCreate, CommentRead
from multiblog.schemas.common import MessageResponse

router = APIRouter(
    prefix="/comments",
    tags=["comments"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[CommentRead])
def get_comments(
    post: Optional[int] = None,
    approved: Optional[bool] = None,
    limit: int = Query(settings.DEFAULT_PAGE_LIMIT, ge=1, le=settings.MAX_PAGE_LIMIT),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db)
):
    """Get comments with post title and slug, newest first."""
    return comment_crud.list_comments(
        db,
        post_id=post,
        approved=approved,
        skip=offset,
        limit=limit
    )


@router.get("/{comment_id}", response_model=CommentRead)
def get_comment(comment_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return comment_crud.read(db, comment_id)


@router.post("", response_model=CommentRead)
def create_comment(comment_data: CommentCreate, db: Session = Depends(get_db)):
    """Create a comment. The referenced post must exist; comments start unapproved."""
    comment = comment_crud.create(db, comment_data)
    return comment_crud.read(db, comment.id)


@router.put("/{comment_id}", response_model=CommentRead)
def update_comment(
    comment_data: CommentCreate,
    comment_id: int = Path(..., gt=0),
    db: Session = Depends(get_db)
):
    comment = comment_crud.update(db, comment_id, comment_data)
    return comment_crud.read(db, comment.id)


@router.delete("/{comment_id}", response_model=MessageResponse)
def delete_comment(comment_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    comment_crud.delete(db, comment_id)
    return MessageResponse(message="Comment deleted successfully")
