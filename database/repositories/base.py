from typing import Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

ModelT = TypeVar("ModelT")


class BaseRepository:
    """Read helpers over a session; the unit of work owns commit and rollback."""

    def __init__(self, db: Session):
        self.db = db

    def _get_one(self, model: Type[ModelT], pk_column, value) -> Optional[ModelT]:
        stmt = select(model).where(pk_column == value)
        return self.db.execute(stmt).scalar_one_or_none()
