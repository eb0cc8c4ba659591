from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from vural_api.utils.text import new_id

ModelT = TypeVar("ModelT")


class CrudRepository(Generic[ModelT]):
    """
    add / update / delete / get / list over one table.

    Repositories only flush; committing is the caller's job so a service can
    group several repository calls into one unit of work.
    """

    model: Type[ModelT] = None
    id_prefix: str = ""
    order_by = None

    def __init__(self, db: Session):
        self.db = db

    def get(self, obj_id: str) -> Optional[ModelT]:
        return self.db.get(self.model, obj_id)

    def list(self, **filters) -> List[ModelT]:
        query = self.db.query(self.model)
        for attr, value in filters.items():
            if value is not None:
                query = query.filter(getattr(self.model, attr) == value)
        if self.order_by is not None:
            query = query.order_by(self.order_by)
        return query.all()

    def add(self, fields: Dict[str, Any]) -> ModelT:
        fields = dict(fields)
        fields.setdefault("id", new_id(self.id_prefix))
        obj = self.model(**fields)
        self.db.add(obj)
        self.db.flush()
        return obj

    def update(self, obj: ModelT, changes: Dict[str, Any]) -> ModelT:
        for attr, value in changes.items():
            setattr(obj, attr, value)
        self.db.flush()
        return obj

    def delete(self, obj: ModelT) -> None:
        self.db.delete(obj)
        self.db.flush()
