"""Base repository utilities."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from sqlalchemy.orm import Session

TModel = TypeVar("TModel")


class SQLAlchemyRepository(Generic[TModel]):
    """Minimal read-only base repository storing the SQLAlchemy session."""

    model: type

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, pk) -> Optional[TModel]:
        return self.session.get(self.model, pk)
