from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError

from travelgo.db import crud
from travelgo.errors import DuplicateError, NotFoundError, ValidationError
from travelgo.services import auth_service, booking_service
from travelgo.services.security import Identity, hash_password, owns_resource, verify_password


def make_booking(passport="P1", **overrides):
    data = {
        "traveler_name": "Alice Tan",
        "passport_num": passport,
        "destination": "Tokyo, Japan",
        "flight_date": date(2025, 12, 1),
        "price": 100,
    }
    data.update(overrides)
    return data


@pytest.fixture
def alice(db_session):
    user = auth_service.register(db_session, "alice", "alice@example.com", "secret1")
    return Identity(user.id, user.username, user.email)


@pytest.fixture
def bob(db_session):
    user = auth_service.register(db_session, "bob", "bob@example.com", "secret1")
    return Identity(user.id, user.username, user.email)


def test_password_hash_round_trip():
    hashed = hash_password("secret1", rounds=4)
    assert hashed != "secret1"
    assert verify_password("secret1", hashed)
    assert not verify_password("secret2", hashed)
    assert not verify_password("secret1", "not-a-bcrypt-hash")


def test_owns_resource(alice, bob, db_session):
    booking = booking_service.create_booking(db_session, alice, make_booking())
    assert owns_resource(alice, booking)
    assert not owns_resource(bob, booking)
    assert not owns_resource(alice, None)


def test_create_defaults(alice, db_session):
    booking = booking_service.create_booking(db_session, alice, make_booking())
    assert booking.status == "Confirmed"
    assert booking.hotel_name == "N/A"
    assert booking.user_id == alice.id


def test_duplicate_passport_detected_by_constraint(alice, bob, db_session):
    booking_service.create_booking(db_session, alice, make_booking("P1"))
    # The store rejects the pair even without any application-level pre-check
    with pytest.raises(DuplicateError):
        crud.create_booking(db_session, alice.id, make_booking("P1"))
    assert crud.create_booking(db_session, bob.id, make_booking("P1")).user_id == bob.id
    assert len(crud.list_bookings(db_session, alice.id)) == 1


def test_check_constraint_rejects_negative_price(alice, db_session):
    with pytest.raises(ValidationError):
        crud.create_booking(db_session, alice.id, make_booking(price=-10))


def test_list_is_owner_scoped(alice, bob, db_session):
    for i in range(5):
        booking_service.create_booking(db_session, alice, make_booking(f"A{i}"))
        booking_service.create_booking(db_session, bob, make_booking(f"B{i}"))

    rows = booking_service.list_bookings(db_session, alice)
    assert len(rows) == 5
    assert all(b.user_id == alice.id for b in rows)


def test_update_and_delete_by_non_owner(alice, bob, db_session):
    booking = booking_service.create_booking(db_session, alice, make_booking())

    with pytest.raises(NotFoundError):
        booking_service.update_booking(db_session, bob, booking.id, {"price": 1})
    with pytest.raises(NotFoundError):
        booking_service.delete_booking(db_session, bob, booking.id)
    with pytest.raises(NotFoundError):
        booking_service.get_booking(db_session, bob, booking.id)

    db_session.refresh(booking)
    assert booking.price == 100


def test_operations_need_existing_owner(db_session):
    ghost = Identity(999, "ghost", "ghost@example.com")
    with pytest.raises(NotFoundError, match="User not found"):
        booking_service.create_booking(db_session, ghost, make_booking())
    with pytest.raises(NotFoundError):
        booking_service.list_bookings(db_session, ghost)


def test_register_stores_hash_and_rejects_duplicates(alice, db_session):
    stored = crud.get_user_by_id(db_session, alice.id)
    assert stored.password_hash != "secret1"
    assert verify_password("secret1", stored.password_hash)

    with pytest.raises(DuplicateError, match="Username"):
        auth_service.register(db_session, "alice", "new@example.com", "secret1")
    with pytest.raises(DuplicateError, match="Email"):
        auth_service.register(db_session, "alice2", "alice@example.com", "secret1")


def test_update_profile_server_side_confirmation(alice, db_session):
    with pytest.raises(ValidationError, match="do not match"):
        auth_service.update_profile(
            db_session, alice.id, {}, current_password="secret1", new_password="secret2", confirm_password="other",
        )


def test_delete_account_cascades(alice, bob, db_session):
    booking_service.create_booking(db_session, alice, make_booking("P1"))
    booking_service.create_booking(db_session, bob, make_booking("P1"))

    auth_service.delete_account(db_session, alice.id)

    assert crud.get_user_by_id(db_session, alice.id) is None
    assert crud.list_bookings(db_session, alice.id) == []
    assert len(crud.list_bookings(db_session, bob.id)) == 1


class DriverError(Exception):
    def __init__(self, message, **codes):
        super().__init__(message)
        for name, value in codes.items():
            setattr(self, name, value)


def integrity_error(message, **codes):
    return IntegrityError("INSERT ...", {}, DriverError(message, **codes))


@pytest.mark.parametrize("error,expected", [
    (integrity_error("constraint failed", sqlite_errorname="SQLITE_CONSTRAINT_UNIQUE"), True),
    (integrity_error("UNIQUE-looking text", sqlite_errorname="SQLITE_CONSTRAINT_CHECK"), False),
    (integrity_error("violates something", pgcode="23505"), True),
    (integrity_error("violates check", pgcode="23514"), False),
    (integrity_error("conflict", sqlstate="23505"), True),
    (integrity_error('duplicate key value violates constraint "uq_booking_owner_passport"'), True),
    (integrity_error("UNIQUE constraint failed: bookings.user_id, bookings.passport_num"), True),
    (integrity_error("UNIQUE constraint failed: users.email"), True),
    (integrity_error("CHECK constraint failed: ck_booking_price_non_negative"), False),
    (integrity_error("NOT NULL constraint failed: bookings.destination"), False),
])
def test_is_unique_violation(error, expected):
    assert crud.is_unique_violation(error) is expected


def test_get_booking_outside_row_id_range(alice, db_session):
    assert crud.get_booking(db_session, crud.MAX_ROW_ID + 1) is None
    assert crud.get_booking(db_session, 0) is None
