from typing import Optional
from sqlalchemy.orm import Session

from healthtrack.core.database_utils import store_operation
from healthtrack.models.user import User
from healthtrack.schemas.user import UserCreate


class CRUDUser:
    """Read access to users plus provisioning for the authentication service."""

    def create(self, db: Session, *, obj_in: UserCreate, id: Optional[str] = None) -> User:
        db_obj = User(**obj_in.model_dump())
        if id is not None:
            db_obj.id = id
        with store_operation(db, "user.create"):
            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)
        return db_obj

    def get(self, db: Session, id: str) -> Optional[User]:
        with store_operation(db, "user.get"):
            return db.query(User).filter(User.id == id).first()

    def get_by_email(self, db: Session, *, email: str) -> Optional[User]:
        with store_operation(db, "user.get_by_email"):
            return db.query(User).filter(User.email == email).first()

    def is_active(self, user: User) -> bool:
        return user.is_active


# Create instance that can be imported directly
user = CRUDUser()
