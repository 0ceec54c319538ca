from typing import Any, Dict, List, Optional, Union
import logging

from sqlalchemy import desc
from sqlalchemy.orm import Session

from healthtrack.core.database_utils import store_operation
from healthtrack.core.errors import NotFound
from healthtrack.models.diary_entry import DiaryEntry
from healthtrack.schemas.diary_entry import DiaryEntryCreate, DiaryEntryUpdate, DiaryMood
from healthtrack.utils.timezone import utc_now
from .base import CRUDBase

logger = logging.getLogger(__name__)


def _plain_mood(data: Dict[str, Any]) -> Dict[str, Any]:
    if isinstance(data.get("mood"), DiaryMood):
        data["mood"] = data["mood"].value
    return data


class CRUDDiaryEntry(CRUDBase[DiaryEntry, DiaryEntryCreate, DiaryEntryUpdate]):
    create_schema = DiaryEntryCreate
    update_schema = DiaryEntryUpdate

    def _by_id(self, db: Session, id: int, user_id: Optional[str]):
        query = db.query(DiaryEntry).filter(DiaryEntry.id == id)
        if user_id is not None:
            query = query.filter(DiaryEntry.user_id == user_id)
        return query

    def create(
        self, db: Session, *, user_id: str, obj_in: Union[DiaryEntryCreate, Dict[str, Any]]
    ) -> DiaryEntry:
        data = _plain_mood(self._create_data(obj_in))
        db_obj = DiaryEntry(user_id=user_id, **data)

        with store_operation(db, "diary_entry.create"):
            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)

        logger.info(f"[DiaryEntryCRUD] Created diary entry {db_obj.id} (user={user_id})")
        return db_obj

    def update(
        self,
        db: Session,
        *,
        id: int,
        obj_in: Union[DiaryEntryUpdate, Dict[str, Any]],
        user_id: Optional[str] = None,
    ) -> DiaryEntry:
        """Change only the supplied fields. Raises NotFound if the entry does not
        exist, or belongs to someone else when ``user_id`` is given."""
        changes = _plain_mood(self._update_data(obj_in))

        with store_operation(db, "diary_entry.update"):
            db_obj = self._by_id(db, id, user_id).first()
            if db_obj is None:
                raise NotFound(f"Diary entry with id {id} not found")

            for field, value in changes.items():
                setattr(db_obj, field, value)
            db_obj.updated_at = utc_now()

            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)

        return db_obj

    def get(self, db: Session, *, id: int, user_id: Optional[str] = None) -> Optional[DiaryEntry]:
        with store_operation(db, "diary_entry.get"):
            return self._by_id(db, id, user_id).first()

    def list(self, db: Session, *, user_id: str) -> List[DiaryEntry]:
        """Newest first by creation time."""
        with store_operation(db, "diary_entry.list"):
            return (
                db.query(DiaryEntry)
                .filter(DiaryEntry.user_id == user_id)
                .order_by(desc(DiaryEntry.created_at), desc(DiaryEntry.id))
                .all()
            )

    def delete(self, db: Session, *, id: int, user_id: Optional[str] = None) -> bool:
        with store_operation(db, "diary_entry.delete"):
            deleted = self._by_id(db, id, user_id).delete(synchronize_session="fetch")
            db.commit()

        if deleted:
            logger.info(f"[DiaryEntryCRUD] Deleted diary entry {id}")
        return deleted > 0


diary_entry = CRUDDiaryEntry(DiaryEntry)
