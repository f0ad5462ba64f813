from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from shared.core.database import get_db
from shared.core.auth import validate_current_token
from shared.core.exceptions import ResourceNotFound
from shared.core.schemas import UserToken
from ..schemas.spaces_schemas import SpaceOut, SpaceRequest
from ..crud import spaces_crud as crud

router = APIRouter(
    prefix="/api/spaces",
    tags=["spaces"]
)

# -----------------------------------------------------------------


@router.post("", response_model=SpaceOut, status_code=status.HTTP_201_CREATED)
def create_space(
        space: SpaceRequest,
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(validate_current_token)):
    return crud.create_space(db, space, current_user.email)


@router.get("", response_model=List[SpaceOut])
def get_spaces(
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(validate_current_token)):
    return crud.get_spaces(db, current_user.email)


@router.get("/{space_id}", response_model=SpaceOut)
def get_space(
        space_id: str,
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(validate_current_token)):
    space = crud.get_space_for_owner(db, space_id, current_user.email)
    if not space:
        raise ResourceNotFound(f"Space not found with id: {space_id}")
    return space


@router.put("/{space_id}", response_model=SpaceOut)
def update_space(
        space_id: str,
        space: SpaceRequest,
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(validate_current_token)):
    return crud.update_space(db, space_id, space, current_user.email)


@router.delete("/{space_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_space(
        space_id: str,
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(validate_current_token)):
    crud.delete_space(db, space_id, current_user.email)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
