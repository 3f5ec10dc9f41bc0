# multiblog/routers/simple.py
"""
Simple post router - creates a blog's posts from raw text with minimal input.
"""
import logging

from fastapi import APIRouter, Depends
from sqlmodel import Session

from multiblog.core.errors import ApiError, InternalError
from multiblog.database.engine import get_db
from multiblog.schemas.simple import SimplePostRequest, SimplePostResponse
from multiblog.services.simple_post_service import simple_post_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/simple",
    tags=["simple"],
)


@router.post("", response_model=SimplePostResponse)
def create_simple_posts(request: SimplePostRequest, db: Session = Depends(get_db)):
    """
    Create published posts from raw text blocks.

    The blog is looked up by exact URL and created when missing, together
    with a default author and a "General" category. Blank texts are skipped.

    Not atomic: if a post fails, posts created before it remain. Retrying a
    failed batch reuses the blog, author and category but creates the posts
    again.
    """
    try:
        return simple_post_service.create_simple_posts(db, request)
    except ApiError:
        raise
    except Exception:
        logger.exception(f"Simple post creation failed for {request.blog_url}")
        raise InternalError("Failed to create posts")
