# multiblog/routers/blogs.py
from fastapi import APIRouter, Depends, Path
from sqlmodel import Session
from typing import List

from multiblog.database.engine import get_db
from multiblog.crud.blog import blog_crud
from multiblog.schemas.blog import BlogCreate, BlogRead
from multiblog.schemas.common import MessageResponse

router = APIRouter(
    prefix="/blogs",
    tags=["blogs"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[BlogRead])
def get_blogs(db: Session = Depends(get_db)):
    """Get all blogs, newest first."""
    return blog_crud.list(db)


@router.get("/{blog_id}", response_model=BlogRead)
def get_blog(blog_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    """Get a single blog by ID."""
    return blog_crud.read(db, blog_id)


@router.post("", response_model=BlogRead)
def create_blog(blog_data: BlogCreate, db: Session = Depends(get_db)):
    """
    Create a new blog.

    **Errors**:
    - 409: another blog already uses the slug
    """
    blog = blog_crud.create(db, blog_data)
    return blog_crud.read(db, blog.id)


@router.put("/{blog_id}", response_model=BlogRead)
def update_blog(
    blog_data: BlogCreate,
    blog_id: int = Path(..., gt=0),
    db: Session = Depends(get_db)
):
    """Replace a blog's fields."""
    blog = blog_crud.update(db, blog_id, blog_data)
    return blog_crud.read(db, blog.id)


@router.delete("/{blog_id}", response_model=MessageResponse)
def delete_blog(blog_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    """Delete a blog together with its authors, categories, posts and their comments."""
    blog_crud.delete(db, blog_id)
    return MessageResponse(message="Blog deleted successfully")
