import logging
from typing import List

from sqlalchemy.orm import Session

from travelgo.db import crud
from travelgo.errors import NotFoundError
from travelgo.models.booking import Booking
from travelgo.services.security import Identity, owns_resource

logger = logging.getLogger(__name__)

BOOKING_NOT_FOUND_MESSAGE = "Booking not found"


def _require_owner(db: Session, identity: Identity):
    # A token can outlive its account; bookings need a live owner
    if crud.get_user_by_id(db, identity.id) is None:
        raise NotFoundError("User not found")


def _owned_booking(db: Session, identity: Identity, booking_id: int) -> Booking:
    booking = crud.get_booking(db, booking_id)
    if not owns_resource(identity, booking):
        if booking is not None:
            logger.warning(f"User {identity.id} tried to access booking {booking_id} owned by another user")
        raise NotFoundError(BOOKING_NOT_FOUND_MESSAGE)
    return booking


def list_bookings(db: Session, identity: Identity) -> List[Booking]:
    _require_owner(db, identity)
    return crud.list_bookings(db, identity.id)


def get_booking(db: Session, identity: Identity, booking_id: int) -> Booking:
    _require_owner(db, identity)
    return _owned_booking(db, identity, booking_id)


def create_booking(db: Session, identity: Identity, fields: dict) -> Booking:
    _require_owner(db, identity)
    booking = crud.create_booking(db, identity.id, fields)
    logger.info(f"User {identity.id} created booking {booking.id}")
    return booking


def update_booking(db: Session, identity: Identity, booking_id: int, fields: dict) -> Booking:
    _require_owner(db, identity)
    booking = _owned_booking(db, identity, booking_id)
    booking = crud.update_booking(db, booking, fields)
    logger.info(f"User {identity.id} updated booking {booking_id}")
    return booking


def delete_booking(db: Session, identity: Identity, booking_id: int) -> None:
    _require_owner(db, identity)
    booking = _owned_booking(db, identity, booking_id)
    crud.delete_booking(db, booking)
    logger.info(f"User {identity.id} deleted booking {booking_id}")
