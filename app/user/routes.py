# app/user/routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.errors import NotFoundError
from app.core.http import json_body, parse_id
from app.user.schemas import UserCreate, UserMessage, UserOut, UserUpdate
from app.user import services as user_service
router = APIRouter(prefix="/users", tags=["Users"])

USER_NOT_FOUND = "User not found."


@router.post("", response_model=UserOut, status_code=201)
def create(user: UserCreate = Depends(json_body(UserCreate)), db: Session = Depends(get_db)):
    return user_service.create_user(db, user)


@router.get("", response_model=list[UserOut])
def list_all(db: Session = Depends(get_db)):
    return user_service.get_all_users(db)


@router.get("/{user_id}", response_model=UserOut)
def get(user_id: str, db: Session = Depends(get_db)):
    user = user_service.get_user(db, parse_id(user_id))
    if not user:
        raise NotFoundError(USER_NOT_FOUND)
    return user


@router.put("/{user_id}", response_model=UserMessage)
def update(
    user_id: str,
    user: UserUpdate = Depends(json_body(UserUpdate)),
    db: Session = Depends(get_db),
):
    updated = user_service.update_user(db, parse_id(user_id), user)
    if not updated:
        raise NotFoundError(USER_NOT_FOUND)
    return {"message": "User updated successfully.", "user": updated}


@router.delete("/{user_id}", response_model=UserMessage)
def delete(user_id: str, db: Session = Depends(get_db)):
    deleted = user_service.delete_user(db, parse_id(user_id))
    if not deleted:
        raise NotFoundError(USER_NOT_FOUND)
    return {"message": "User deleted successfully.", "user": deleted}
