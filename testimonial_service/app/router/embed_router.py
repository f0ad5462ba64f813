from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from shared.core.database import get_db
from ..schemas.reviews_schemas import ReviewOut
from ..crud import reviews_crud as crud

router = APIRouter(prefix="/api/embed", tags=["embed"])


@router.get("/{space_id}", response_model=List[ReviewOut])
def get_liked_reviews(space_id: str, db: Session = Depends(get_db)):
    return crud.get_liked_reviews(db, space_id)
