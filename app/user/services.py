# app/user/services.py
import logging

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.core.errors import ConflictError, ValidationError
from app.core.http import as_text, is_blank
from app.user.models import User
from app.user.schemas import UserCreate, UserUpdate

logger = logging.getLogger(__name__)

FIELDS_REQUIRED = "The fields name and email are required."
ALREADY_EXISTS = "A user with this name or email already exists."


def get_all_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.id).all()


def get_user(db: Session, user_id: int | None) -> User | None:
    if user_id is None:
        return None
    return db.query(User).filter(User.id == user_id).first()


def _find_clash(db: Session, name: str, email: str, exclude_id: int | None = None) -> User | None:
    query = db.query(User).filter(or_(User.name == name, User.email == email))
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    return query.first()


def create_user(db: Session, payload: UserCreate) -> User:
    if is_blank(payload.name) or is_blank(payload.email):
        raise ValidationError(FIELDS_REQUIRED)

    name, email = as_text(payload.name), as_text(payload.email)
    if _find_clash(db, name, email):
        logger.info("Rejected duplicate user name=%r email=%r", name, email)
        raise ConflictError(ALREADY_EXISTS)

    db_user = User(name=name, email=email)
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    logger.info("Created user %s", db_user.id)
    return db_user


def update_user(db: Session, user_id: int | None, payload: UserUpdate) -> User | None:
    """Merge the non-blank fields of ``payload`` onto the user.

    Omitted, null and empty fields keep their stored value. Returns None when
    the user does not exist.
    """
    db_user = get_user(db, user_id)
    if not db_user:
        return None

    changes = {
        field: as_text(value)
        for field, value in payload.model_dump().items()
        if not is_blank(value)
    }
    if not changes:
        return db_user

    name = changes.get("name", db_user.name)
    email = changes.get("email", db_user.email)
    if _find_clash(db, name, email, exclude_id=db_user.id):
        logger.info("Rejected update of user %s: name or email taken", db_user.id)
        raise ConflictError(ALREADY_EXISTS)

    for field, value in changes.items():
        setattr(db_user, field, value)
    db.commit()
    db.refresh(db_user)
    logger.info("Updated user %s (%s)", db_user.id, ", ".join(sorted(changes)))
    return db_user


def delete_user(db: Session, user_id: int | None) -> User | None:
    db_user = get_user(db, user_id)
    if not db_user:
        return None
    # Tickets only hold the id, they outlive their user
    db.delete(db_user)
    db.commit()
    logger.info("Deleted user %s", db_user.id)
    return db_user
