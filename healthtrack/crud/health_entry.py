from datetime import date
from typing import Any, Dict, List, Optional, Union
import logging

from sqlalchemy import desc
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from healthtrack.core.database_utils import store_operation
from healthtrack.core.errors import DuplicateKey, NotFound
from healthtrack.health_scoring.engine import overall_from_metrics
from healthtrack.models.health_entry import HealthEntry, METRIC_FIELDS
from healthtrack.schemas.health_entry import HealthEntryCreate, HealthEntryUpdate
from healthtrack.utils.timezone import utc_now
from .base import CRUDBase

logger = logging.getLogger(__name__)

_UPSERT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class CRUDHealthEntry(CRUDBase[HealthEntry, HealthEntryCreate, HealthEntryUpdate]):
    """Daily health entries, one per (user, date).

    Every write path computes ``overall_score`` from the five metrics it is
    about to store and commits both in the same statement/transaction.
    """

    create_schema = HealthEntryCreate
    update_schema = HealthEntryUpdate

    def _by_key(self, db: Session, user_id: str, entry_date: date):
        return db.query(HealthEntry).filter(
            HealthEntry.user_id == user_id,
            HealthEntry.date == entry_date,
        )

    def get(self, db: Session, *, user_id: str, date: date) -> Optional[HealthEntry]:
        """Entry for that exact date, or None."""
        with store_operation(db, "health_entry.get"):
            return self._by_key(db, user_id, date).first()

    def list(
        self,
        db: Session,
        *,
        user_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[HealthEntry]:
        """All entries for the user, newest date first. Both bounds are inclusive and optional."""
        query = db.query(HealthEntry).filter(HealthEntry.user_id == user_id)
        if start_date:
            query = query.filter(HealthEntry.date >= start_date)
        if end_date:
            query = query.filter(HealthEntry.date <= end_date)

        with store_operation(db, "health_entry.list"):
            return query.order_by(desc(HealthEntry.date)).all()

    def create(
        self, db: Session, *, user_id: str, obj_in: Union[HealthEntryCreate, Dict[str, Any]]
    ) -> HealthEntry:
        """Insert a new entry. Raises DuplicateKey if the date already has one."""
        data = self._create_data(obj_in)
        data["overall_score"] = overall_from_metrics(data)
        db_obj = HealthEntry(user_id=user_id, **data)

        with store_operation(db, "health_entry.create"):
            db.add(db_obj)
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                if self._by_key(db, user_id, data["date"]).first() is not None:
                    logger.info(f"[HealthEntryCRUD] Entry for {data['date']} already exists (user={user_id})")
                    raise DuplicateKey(f"Health entry for date {data['date']} already exists")
                raise
            db.refresh(db_obj)

        logger.info(f"[HealthEntryCRUD] Created entry {data['date']} overall={db_obj.overall_score} (user={user_id})")
        return db_obj

    def update(
        self,
        db: Session,
        *,
        user_id: str,
        date: date,
        obj_in: Union[HealthEntryUpdate, Dict[str, Any]],
    ) -> HealthEntry:
        """Merge the supplied metrics over the stored ones and recompute the overall score
        from all five resulting values. Raises NotFound if there is no entry for the date.
        """
        changes = self._update_data(obj_in)

        with store_operation(db, "health_entry.update"):
            # Row lock on PostgreSQL so the merge reads what it overwrites
            db_obj = self._by_key(db, user_id, date).with_for_update().first()
            if db_obj is None:
                db.rollback()
                raise NotFound(f"Health entry for date {date} not found")

            for field, value in changes.items():
                if value is not None:
                    setattr(db_obj, field, value)
            db_obj.overall_score = overall_from_metrics(db_obj.metric_values())
            db_obj.updated_at = utc_now()

            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)

        logger.info(f"[HealthEntryCRUD] Updated entry {date} fields={sorted(changes)} overall={db_obj.overall_score}")
        return db_obj

    def upsert(
        self, db: Session, *, user_id: str, obj_in: Union[HealthEntryCreate, Dict[str, Any]]
    ) -> HealthEntry:
        """Save the day's metrics whether or not the date already has an entry.

        A single INSERT ... ON CONFLICT (user_id, date) DO UPDATE, so two
        concurrent first saves cannot both insert; the last one wins and its
        overall score travels with it.
        """
        data = self._create_data(obj_in)
        data["overall_score"] = overall_from_metrics(data)
        now = utc_now()

        insert = self._insert_for(db)
        stmt = insert(HealthEntry).values(user_id=user_id, created_at=now, updated_at=now, **data)
        overwrite = METRIC_FIELDS + ("overall_score", "updated_at")
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "date"],
            set_={field: stmt.excluded[field] for field in overwrite},
        )

        with store_operation(db, "health_entry.upsert"):
            db.execute(stmt)
            db.commit()
            db_obj = self._by_key(db, user_id, data["date"]).populate_existing().first()

        logger.info(f"[HealthEntryCRUD] Saved entry {data['date']} overall={data['overall_score']} (user={user_id})")
        return db_obj

    def delete(self, db: Session, *, user_id: str, date: date) -> bool:
        """Remove the entry if present. Returns False when there was nothing to delete."""
        with store_operation(db, "health_entry.delete"):
            deleted = self._by_key(db, user_id, date).delete(synchronize_session="fetch")
            db.commit()

        if deleted:
            logger.info(f"[HealthEntryCRUD] Deleted entry {date} (user={user_id})")
        return deleted > 0

    @staticmethod
    def _insert_for(db: Session):
        dialect = db.get_bind().dialect.name
        try:
            return _UPSERT_INSERTS[dialect]
        except KeyError:
            raise RuntimeError(f"Atomic upsert is not supported on the '{dialect}' dialect")


health_entry = CRUDHealthEntry(HealthEntry)
