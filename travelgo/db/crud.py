import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from travelgo.errors import DuplicateError, ValidationError
from travelgo.models.booking import Booking
from travelgo.models.destination import Destination
from travelgo.models.user import User

logger = logging.getLogger(__name__)

DUPLICATE_PASSPORT_MESSAGE = "Error: Passport Number already exists."


# Driver error codes: sqlite3 (3.11+) error names, PostgreSQL SQLSTATE
UNIQUE_VIOLATION_CODES = {"SQLITE_CONSTRAINT_UNIQUE", "SQLITE_CONSTRAINT_PRIMARYKEY", "23505"}

# Fallback when the driver exposes no code: constraint names (PostgreSQL)
# or the constrained columns (SQLite before 3.11)
UNIQUE_CONSTRAINT_MARKERS = (
    "uq_booking_owner_passport",
    "bookings.user_id, bookings.passport_num",
    "users_username_key",
    "users_email_key",
    "ix_users_username",
    "ix_users_email",
    "users.username",
    "users.email",
)

# SQLite INTEGER primary keys are signed 64-bit
MAX_ROW_ID = 2**63 - 1


def is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    code = (
        getattr(orig, "sqlite_errorname", None)
        or getattr(orig, "pgcode", None)
        or getattr(orig, "sqlstate", None)
    )
    if code is not None:
        return code in UNIQUE_VIOLATION_CODES
    text = str(orig)
    return any(marker in text for marker in UNIQUE_CONSTRAINT_MARKERS)


def _commit(db: Session, duplicate_message: str):
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_unique_violation(e):
            raise DuplicateError(duplicate_message) from e
        logger.warning(f"Integrity violation rejected: {e.orig}")
        raise ValidationError(f"Invalid data: {e.orig}") from e


# --------------------------
# Users
# --------------------------

def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()

def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()

def create_user(db: Session, username: str, email: str, password_hash: str) -> User:
    user = User(username=username, email=email, password_hash=password_hash)
    db.add(user)
    _commit(db, "Username or email already exists.")
    db.refresh(user)
    return user

def update_user(db: Session, user: User, data: dict) -> User:
    for key, value in data.items():
        setattr(user, key, value)
    _commit(db, "Username or email already exists.")
    db.refresh(user)
    return user

def delete_user(db: Session, user: User) -> None:
    # Owned bookings go with the user through the relationship cascade
    db.delete(user)
    db.commit()


# --------------------------
# Bookings
# --------------------------

def list_bookings(db: Session, owner_id: int) -> List[Booking]:
    return db.query(Booking).filter(Booking.user_id == owner_id).order_by(Booking.id).all()

def get_booking(db: Session, booking_id: int) -> Optional[Booking]:
    if not 1 <= booking_id <= MAX_ROW_ID:
        return None
    return db.query(Booking).filter(Booking.id == booking_id).first()

def create_booking(db: Session, owner_id: int, data: dict) -> Booking:
    booking = Booking(user_id=owner_id, **data)
    db.add(booking)
    _commit(db, DUPLICATE_PASSPORT_MESSAGE)
    db.refresh(booking)
    return booking

def update_booking(db: Session, booking: Booking, data: dict) -> Booking:
    for key, value in data.items():
        setattr(booking, key, value)
    _commit(db, DUPLICATE_PASSPORT_MESSAGE)
    db.refresh(booking)
    return booking

def delete_booking(db: Session, booking: Booking) -> None:
    db.delete(booking)
    db.commit()


# --------------------------
# Destinations
# --------------------------

def list_destinations(db: Session) -> List[Destination]:
    return db.query(Destination).order_by(Destination.name).all()
