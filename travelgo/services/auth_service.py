import logging

from sqlalchemy.orm import Session

from travelgo.db import crud
from travelgo.errors import DuplicateError, NotFoundError, UnauthorizedError, ValidationError
from travelgo.models.user import User
from travelgo.services.security import hash_password, verify_password

logger = logging.getLogger(__name__)

INVALID_LOGIN_MESSAGE = "Invalid username or password"


def register(db: Session, username: str, email: str, password: str) -> User:
    # Checked up front so the caller learns which field clashed
    if crud.get_user_by_username(db, username):
        raise DuplicateError("Username already exists")
    if crud.get_user_by_email(db, email):
        raise DuplicateError("Email already registered")

    user = crud.create_user(db, username, email, hash_password(password))
    logger.info(f"Registered user {user.id} ({user.username})")
    return user


def authenticate(db: Session, username: str, password: str) -> User:
    user = crud.get_user_by_username(db, username)
    if user is None or not verify_password(password, user.password_hash):
        logger.warning(f"Failed login for username '{username}'")
        raise UnauthorizedError(INVALID_LOGIN_MESSAGE)
    logger.info(f"User {user.id} logged in")
    return user


def get_user(db: Session, user_id: int) -> User:
    user = crud.get_user_by_id(db, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def update_profile(
    db: Session,
    user_id: int,
    fields: dict,
    current_password: str = None,
    new_password: str = None,
    confirm_password: str = None,
) -> User:
    user = get_user(db, user_id)
    changes = {}

    username = fields.get("username")
    if username is not None and username != user.username:
        if crud.get_user_by_username(db, username):
            raise DuplicateError("Username already exists")
        changes["username"] = username

    email = fields.get("email")
    if email is not None and email != user.email:
        if crud.get_user_by_email(db, email):
            raise DuplicateError("Email already registered")
        changes["email"] = email

    if new_password is not None:
        if confirm_password is not None and new_password != confirm_password:
            raise ValidationError("New password and confirmation do not match")
        if not current_password or not verify_password(current_password, user.password_hash):
            raise ValidationError("Current password is incorrect")
        changes["password_hash"] = hash_password(new_password)

    if not changes:
        return user

    user = crud.update_user(db, user, changes)
    logger.info(f"Updated profile of user {user.id}: {sorted(changes)}")
    return user


def delete_account(db: Session, user_id: int) -> None:
    user = get_user(db, user_id)
    crud.delete_user(db, user)
    logger.info(f"Deleted user {user_id} and their bookings")
