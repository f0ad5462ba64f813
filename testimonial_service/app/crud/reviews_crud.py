import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from shared.core.exceptions import NotAuthorized, ResourceNotFound
from shared.models.reviews import Review
from shared.models.spaces import Space
from ..schemas.reviews_schemas import ReviewRequest
from . import spaces_crud

logger = logging.getLogger(__name__)


def get_review_by_id(db: Session, review_id: str) -> Optional[Review]:
    return db.query(Review).filter(Review.id == review_id).first()


def _get_owned_review(db: Session, review_id: str, owner_email: str) -> Review:
    """Walk review -> space -> owner; no ownership is cached on the review."""
    review = get_review_by_id(db, review_id)
    if not review:
        raise ResourceNotFound(f"Review not found with id: {review_id}")

    if not spaces_crud.get_space_for_owner(db, review.space_id, owner_email):
        raise NotAuthorized("User not authorized to modify this review")
    return review


def submit_review(db: Session, slug: str, review: ReviewRequest) -> Space:
    space = spaces_crud.get_space_by_slug(db, slug)
    if not space:
        raise ResourceNotFound(f"Space not found with slug: {slug}")

    db_review = Review(
        space_id=space.id,
        author_name=review.author_name,
        author_email=review.author_email,
        rating=review.rating,
        text=review.text,
        liked=False,
    )
    db.add(db_review)
    db.commit()

    logger.info("Accepted review for space %s", space.id)
    # the caller only needs the space for its redirect url
    return space


def get_reviews_for_space(db: Session, space_id: str, owner_email: str) -> List[Review]:
    space = spaces_crud.get_space_for_owner(db, space_id, owner_email)
    if not space:
        raise ResourceNotFound("Space not found or user not authorized")

    return db.query(Review).filter(Review.space_id == space.id).all()


def toggle_like(db: Session, review_id: str, owner_email: str) -> Review:
    review = _get_owned_review(db, review_id, owner_email)

    review.liked = not review.liked
    db.commit()
    db.refresh(review)

    logger.info("Review %s liked=%s", review.id, review.liked)
    return review


def delete_review(db: Session, review_id: str, owner_email: str) -> None:
    review = _get_owned_review(db, review_id, owner_email)

    db.delete(review)
    db.commit()

    logger.info("Deleted review %s", review_id)


def get_liked_reviews(db: Session, space_id: str) -> List[Review]:
    if not spaces_crud.space_exists(db, space_id):
        raise ResourceNotFound(f"Space not found with id: {space_id}")

    return db.query(Review).filter(
        Review.space_id == space_id,
        Review.liked == True
    ).all()
