# multiblog/crud/base.py
"""
Generic entity store.

One ``CRUDBase`` subclass per table supplies the model, the read schema, the
default ordering and, where needed, an enrichment join and foreign-key
checks. Each write commits on its own; nothing here spans a transaction
across several calls.
"""
from sqlmodel import Session, SQLModel, select, and_
from pydantic import BaseModel
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from multiblog.core.errors import NotFoundError

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
ReadSchemaType = TypeVar("ReadSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, ReadSchemaType]):
    def __init__(
        self,
        model: Type[ModelType],
        read_schema: Type[ReadSchemaType],
        label: str,
        order_by: Sequence[Any] = (),
    ):
        self.model = model
        self.read_schema = read_schema
        self.label = label
        self.order_by = tuple(order_by)

    # ============ Hooks ============

    def enriched_select(self):
        """Query used by every read path. Override to join display names."""
        return select(self.model)

    def to_read(self, row: Any) -> ReadSchemaType:
        return self.read_schema(**row.model_dump())

    def validate(self, db: Session, data: CreateSchemaType, current: Optional[ModelType] = None) -> None:
        """Check references and uniqueness before any write. Raises ApiError."""

    def values_for_create(self, data: CreateSchemaType) -> Dict[str, Any]:
        return data.model_dump()

    def values_for_update(self, data: CreateSchemaType, current: ModelType) -> Dict[str, Any]:
        return data.model_dump()

    # ============ Reads ============

    def get(self, db: Session, id: int) -> Optional[ModelType]:
        """Get row by ID."""
        return db.get(self.model, id)

    def get_or_404(self, db: Session, id: int) -> ModelType:
        obj = db.get(self.model, id)
        if obj is None:
            raise NotFoundError(f"{self.label} not found")
        return obj

    def find_first(self, db: Session, *conditions) -> Optional[ModelType]:
        """First matching row by ascending id, or None."""
        query = select(self.model)
        if conditions:
            query = query.where(and_(*conditions))
        return db.exec(query.order_by(self.model.id).limit(1)).first()

    def read(self, db: Session, id: int) -> ReadSchemaType:
        """Get one enriched row; raises NotFoundError."""
        row = db.exec(self.enriched_select().where(self.model.id == id)).first()
        if row is None:
            raise NotFoundError(f"{self.label} not found")
        return self.to_read(row)

    def list(
        self,
        db: Session,
        *conditions,
        skip: int = 0,
        limit: Optional[int] = None
    ) -> List[ReadSchemaType]:
        """List enriched rows in the entity's default order."""
        query = self.enriched_select()
        if conditions:
            query = query.where(and_(*conditions))
        query = query.order_by(*self.order_by)
        if limit is not None:
            query = query.offset(skip).limit(limit)
        return [self.to_read(row) for row in db.exec(query).all()]

    # ============ Writes ============

    def insert(self, db: Session, **values) -> ModelType:
        """Insert a row and re-read it from the store."""
        obj = self.model(**values)
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj

    def create(self, db: Session, data: CreateSchemaType) -> ModelType:
        self.validate(db, data)
        return self.insert(db, **self.values_for_create(data))

    def update(self, db: Session, id: int, data: CreateSchemaType) -> ModelType:
        """Replace every writable field of an existing row."""
        obj = self.get_or_404(db, id)
        self.validate(db, data, obj)

        for field, value in self.values_for_update(data, obj).items():
            setattr(obj, field, value)

        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj

    def delete(self, db: Session, id: int) -> None:
        """Delete a row; dependent rows go through the store's cascade rules."""
        obj = self.get_or_404(db, id)
        db.delete(obj)
        db.commit()

    # ============ Helpers ============

    @staticmethod
    def require(db: Session, model: Type[SQLModel], id: int, label: str) -> None:
        """Raise NotFoundError if a referenced row is missing."""
        if db.get(model, id) is None:
            raise NotFoundError(f"{label} not found")
