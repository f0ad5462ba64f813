from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from shared.core.database import get_db
from shared.core.auth import validate_current_token
from shared.core.schemas import UserToken
from ..schemas.reviews_schemas import ReviewOut, ReviewRequest, ReviewSubmitted
from ..crud import reviews_crud as crud

# submission is public, curation routes declare the token dependency themselves
router = APIRouter(
    prefix="/api/reviews",
    tags=["reviews"],
)


@router.post("/{slug}", response_model=ReviewSubmitted, status_code=status.HTTP_201_CREATED)
def submit_review(
        slug: str,
        review: ReviewRequest,
        db: Session = Depends(get_db)):
    space = crud.submit_review(db, slug, review)
    return {"redirect_url": space.redirect_url}


@router.get("/{space_id}", response_model=List[ReviewOut])
def get_reviews_for_space(
        space_id: str,
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(validate_current_token)):
    return crud.get_reviews_for_space(db, space_id, current_user.email)


@router.put("/{review_id}/like", response_model=ReviewOut)
def toggle_like(
        review_id: str,
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(validate_current_token)):
    return crud.toggle_like(db, review_id, current_user.email)


@router.delete("/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_review(
        review_id: str,
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(validate_current_token)):
    crud.delete_review(db, review_id, current_user.email)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
