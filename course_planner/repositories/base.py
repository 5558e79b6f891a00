from typing import Generic, Type, TypeVar, Optional, Any
from sqlalchemy.orm import Session

T = TypeVar("T")

class BaseRepository(Generic[T]):
    def __init__(self, model: Type[T]):
        self.model = model

    def get(self, db: Session, id: Any) -> Optional[T]:
        return db.get(self.model, id)

    def get_by_field(self, db: Session, field_name: str, value: Any) -> Optional[T]:
        if not hasattr(self.model, field_name):
            return None
        return db.query(self.model).filter(getattr(self.model, field_name) == value).first()
