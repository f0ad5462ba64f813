import logging
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shared.core.config import settings
from shared.core.exceptions import OwnerNotFound, ResourceNotFound, SlugConflict
from shared.helpers.slug_helper import allocate_slug, build_public_url
from shared.models.spaces import Space
from shared.models.users import Users
from ..schemas.spaces_schemas import SpaceRequest

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
# LOOKUPS
# ----------------------------------------------------------------------


def get_owner(db: Session, owner_email: str) -> Users:
    user = db.query(Users).filter(Users.email == owner_email).first()
    if not user:
        raise OwnerNotFound(f"User not found with email: {owner_email}")
    return user


def slug_exists(db: Session, slug: str) -> bool:
    return db.query(Space.id).filter(Space.slug == slug).first() is not None


def space_exists(db: Session, space_id: str) -> bool:
    return db.query(Space.id).filter(Space.id == space_id).first() is not None


def get_space_by_slug(db: Session, slug: str) -> Optional[Space]:
    return db.query(Space).filter(Space.slug == slug).first()


def get_space_for_owner(db: Session, space_id: str, owner_email: str) -> Optional[Space]:
    """Space with ``space_id`` if ``owner_email`` owns it, else None.

    Unknown id, foreign owner and unknown email all give None so a
    non-owner cannot tell which spaces exist.
    """
    user = db.query(Users).filter(Users.email == owner_email).first()
    if not user:
        return None

    return db.query(Space).filter(
        Space.id == space_id,
        Space.user_id == user.id
    ).first()

# ----------------------------------------------------------------------
# CRUD OPERATIONS
# ----------------------------------------------------------------------


def get_spaces(db: Session, owner_email: str) -> List[Space]:
    user = get_owner(db, owner_email)
    return db.query(Space).filter(Space.user_id == user.id).all()


def create_space(db: Session, space: SpaceRequest, owner_email: str) -> Space:
    user = get_owner(db, owner_email)
    user_id = user.id

    for attempt in range(1, settings.SLUG_ALLOCATION_ATTEMPTS + 1):
        slug = allocate_slug(space.name, lambda candidate: slug_exists(db, candidate))

        db_space = Space(
            name=space.name,
            redirect_url=space.redirect_url,
            slug=slug,
            public_url=build_public_url(settings.PUBLIC_PATH_PREFIX, slug),
        )
        user.spaces.append(db_space)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            # only a slug claimed between probe and insert is worth retrying
            if get_space_by_slug(db, slug) is None:
                logger.error("Space insert for user %s failed on a non-slug constraint",
                             user_id)
                raise
            logger.warning("Slug %s taken concurrently (attempt %d of %d)",
                           slug, attempt, settings.SLUG_ALLOCATION_ATTEMPTS)
            continue

        db.refresh(db_space)
        logger.info("Created space %s with slug %s for user %s",
                    db_space.id, db_space.slug, user_id)
        return db_space

    raise SlugConflict()


def update_space(db: Session, space_id: str, space: SpaceRequest, owner_email: str) -> Space:
    db_space = get_space_for_owner(db, space_id, owner_email)
    if not db_space:
        raise ResourceNotFound(f"Space not found with id: {space_id}")

    # slug and public url stay as allocated
    db_space.name = space.name
    db_space.redirect_url = space.redirect_url
    db.commit()
    db.refresh(db_space)

    logger.info("Updated space %s", db_space.id)
    return db_space


def delete_space(db: Session, space_id: str, owner_email: str) -> None:
    db_space = get_space_for_owner(db, space_id, owner_email)
    if not db_space:
        raise ResourceNotFound(f"Space not found with id: {space_id}")

    # reviews go with the space through the relationship cascade
    db.delete(db_space)
    db.commit()

    logger.info("Deleted space %s", space_id)
