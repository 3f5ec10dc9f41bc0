# multiblog/routers/authors.py
from fastapi import APIRouter, Depends, Path
from sqlmodel import Session
from typing import List

from multiblog.database.engine import get_db
from multiblog.crud.blog import author_crud
from multiblog.schemas.blog import AuthorCreate, AuthorRead
from multiblog.schemas.common import MessageResponse

router = APIRouter(
    prefix="/authors",
    tags=["authors"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[AuthorRead])
def get_authors(db: Session = Depends(get_db)):
    """Get all authors with their blog name, newest first."""
    return author_crud.list(db)


@router.get("/{author_id}", response_model=AuthorRead)
def get_author(author_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return author_crud.read(db, author_id)


@router.post("", response_model=AuthorRead)
def create_author(author_data: AuthorCreate, db: Session = Depends(get_db)):
    """Create an author. The referenced blog must exist."""
    author = author_crud.create(db, author_data)
    return author_crud.read(db, author.id)


@router.put("/{author_id}", response_model=AuthorRead)
def update_author(
    author_data: AuthorCreate,
    author_id: int = Path(..., gt=0),
    db: Session = Depends(get_db)
):
    author = author_crud.update(db, author_id, author_data)
    return author_crud.read(db, author.id)


@router.delete("/{author_id}", response_model=MessageResponse)
def delete_author(author_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    author_crud.delete(db, author_id)
    return MessageResponse(message="Author deleted successfully")
