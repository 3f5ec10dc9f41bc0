# multiblog/routers/categories.py
from fastapi import APIRouter, Depends, Path
from sqlmodel import Session
from typing import List

from multiblog.database.engine import get_db
from multiblog.crud.blog import category_crud
from multiblog.schemas.blog import CategoryCreate, CategoryRead
from multiblog.schemas.common import MessageResponse

router = APIRouter(
    prefix="/categories",
    tags=["categories"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[CategoryRead])
def get_categories(db: Session = Depends(get_db)):
    """Get all categories with their blog name, alphabetical."""
    return category_crud.list(db)


@router.get("/{category_id}", response_model=CategoryRead)
def get_category(category_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return category_crud.read(db, category_id)


@router.post("", response_model=CategoryRead)
def create_category(category_data: CategoryCreate, db: Session = Depends(get_db)):
    """Create a category. The referenced blog must exist."""
    category = category_crud.create(db, category_data)
    return category_crud.read(db, category.id)


@router.put("/{category_id}", response_model=CategoryRead)
def update_category(
    category_data: CategoryCreate,
    category_id: int = Path(..., gt=0),
    db: Session = Depends(get_db)
):
    category = category_crud.update(db, category_id, category_data)
    return category_crud.read(db, category.id)


@router.delete("/{category_id}", response_model=MessageResponse)
def delete_category(category_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    """Delete a category. Posts in it keep existing without a category."""
    category_crud.delete(db, category_id)
    return MessageResponse(message="Category deleted successfully")
