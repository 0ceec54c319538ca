from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from healthtrack.api import deps
from healthtrack import crud
from healthtrack.models.user import User
from healthtrack.schemas.diary_entry import DiaryEntry, DiaryEntryCreate, DiaryEntryUpdate

router = APIRouter()


@router.get("", response_model=List[DiaryEntry])
def list_diary_entries(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    return crud.diary_entry.list(db, user_id=current_user.id)


@router.get("/{entry_id}", response_model=DiaryEntry)
def get_diary_entry(
    entry_id: int,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    entry = crud.diary_entry.get(db, id=entry_id, user_id=current_user.id)
    if not entry:
        raise HTTPException(status_code=404, detail="Diary entry not found")
    return entry


@router.post("", response_model=DiaryEntry)
def create_diary_entry(
    *,
    db: Session = Depends(deps.get_db),
    entry_in: DiaryEntryCreate,
    current_user: User = Depends(deps.get_current_active_user),
):
    return crud.diary_entry.create(db, user_id=current_user.id, obj_in=entry_in)


@router.put("/{entry_id}", response_model=DiaryEntry)
def update_diary_entry(
    *,
    entry_id: int,
    db: Session = Depends(deps.get_db),
    entry_in: DiaryEntryUpdate,
    current_user: User = Depends(deps.get_current_active_user),
):
    # Other users' entries are indistinguishable from missing ones
    return crud.diary_entry.update(db, id=entry_id, obj_in=entry_in, user_id=current_user.id)


@router.delete("/{entry_id}")
def delete_diary_entry(
    entry_id: int,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    deleted = crud.diary_entry.delete(db, id=entry_id, user_id=current_user.id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Diary entry not found")
    return {"message": "Diary entry deleted successfully"}
