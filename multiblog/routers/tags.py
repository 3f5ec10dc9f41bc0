# multiblog/routers/tags.py
from fastapi import APIRouter, Depends, Path
from sqlmodel import Session
from typing import List

from multiblog.database.engine import get_db
from multiblog.crud.blog import tag_crud
from multiblog.schemas.blog import TagCreate, TagRead
from multiblog.schemas.common import MessageResponse

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    responses={404: {"description": "Not found"}, 409: {"description": "Duplicate name"}},
)


@router.get("", response_model=List[TagRead])
def get_tags(db: Session = Depends(get_db)):
    """Get all tags with post counts, alphabetical."""
    return tag_crud.list(db)


@router.get("/{tag_id}", response_model=TagRead)
def get_tag(tag_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return tag_crud.read(db, tag_id)


@router.post("", response_model=TagRead)
def create_tag(tag_data: TagCreate, db: Session = Depends(get_db)):
    """Create a tag. Names are unique across all blogs."""
    tag = tag_crud.create(db, tag_data)
    return tag_crud.read(db, tag.id)


@router.put("/{tag_id}", response_model=TagRead)
def update_tag(
    tag_data: TagCreate,
    tag_id: int = Path(..., gt=0),
    db: Session = Depends(get_db)
):
    """Rename a tag."""
    tag = tag_crud.update(db, tag_id, tag_data)
    return tag_crud.read(db, tag.id)


@router.delete("/{tag_id}", response_model=MessageResponse)
def delete_tag(tag_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    """Delete a tag (removes all associations with posts)."""
    tag_crud.delete(db, tag_id)
    return MessageResponse(message="Tag deleted successfully")
