from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from healthtrack.api import deps
from healthtrack import crud
from healthtrack.models.user import User
from healthtrack.schemas.health_entry import HealthEntry, HealthEntryCreate, HealthEntryUpdate

router = APIRouter()


@router.get("", response_model=List[HealthEntry])
def list_health_entries(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
):
    """Entries for the current user, newest first, optionally within [start_date, end_date]."""
    return crud.health_entry.list(
        db, user_id=current_user.id, start_date=start_date, end_date=end_date
    )


@router.get("/{entry_date}", response_model=HealthEntry)
def get_health_entry(
    entry_date: date,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    entry = crud.health_entry.get(db, user_id=current_user.id, date=entry_date)
    if not entry:
        raise HTTPException(status_code=404, detail="Health entry not found")
    return entry


@router.post("", response_model=HealthEntry)
def save_health_entry(
    *,
    db: Session = Depends(deps.get_db),
    entry_in: HealthEntryCreate,
    current_user: User = Depends(deps.get_current_active_user),
):
    """Save the day's metrics, creating the entry or overwriting the existing one."""
    return crud.health_entry.upsert(db, user_id=current_user.id, obj_in=entry_in)


@router.put("/{entry_date}", response_model=HealthEntry)
def update_health_entry(
    *,
    entry_date: date,
    db: Session = Depends(deps.get_db),
    entry_in: HealthEntryUpdate,
    current_user: User = Depends(deps.get_current_active_user),
):
    return crud.health_entry.update(
        db, user_id=current_user.id, date=entry_date, obj_in=entry_in
    )


@router.delete("/{entry_date}")
def delete_health_entry(
    entry_date: date,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    deleted = crud.health_entry.delete(db, user_id=current_user.id, date=entry_date)
    if not deleted:
        raise HTTPException(status_code=404, detail="Health entry not found")
    return {"message": "Health entry deleted successfully"}
