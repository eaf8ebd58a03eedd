"""Load sample destinations and bookings straight into the database.

Run with ``python -m travelgo.db.seed``. Existing bookings and destinations
are cleared first; the demo owner account is created or reused.
"""
import logging
from datetime import date

from sqlalchemy.orm import Session

from travelgo.config import settings
from travelgo.db.session import SessionLocal, init_db
from travelgo.models.booking import Booking
from travelgo.models.destination import Destination
from travelgo.models.user import User
from travelgo.services.security import hash_password

logger = logging.getLogger(__name__)

SAMPLE_DESTINATIONS = [
    "Bangkok, Thailand",
    "Bali, Indonesia",
    "Dubai, UAE",
    "London, UK",
    "Malibu, USA",
    "New York, USA",
    "Paris, France",
    "Rome, Italy",
    "Seoul, South Korea",
    "Sydney, Australia",
    "Tokyo, Japan",
    "Venice, Italy",
]

SAMPLE_BOOKINGS = [
    {"traveler_name": "Ronald Lee Kai Ren", "passport_num": "A10021626", "destination": "Tokyo, Japan",
     "flight_date": date(2025, 12, 1), "hotel_name": "Shinjuku Granbell Hotel", "status": "Confirmed", "price": 4500},
    {"traveler_name": "Lee Ho Yi", "passport_num": "B10293847", "destination": "Paris, France",
     "flight_date": date(2025, 11, 15), "hotel_name": "Hotel Ritz Paris", "status": "Pending", "price": 8200},
    {"traveler_name": "ZengYu", "passport_num": "C10025775", "destination": "New York, USA",
     "flight_date": date(2026, 1, 10), "hotel_name": "The Plaza", "status": "Confirmed", "price": 6000},
    {"traveler_name": "Dai Ziqiu", "passport_num": "D10023717", "destination": "Seoul, South Korea",
     "flight_date": date(2025, 10, 20), "hotel_name": "Lotte Hotel Seoul", "status": "Cancelled", "price": 3200},
    {"traveler_name": "Sarah Connor", "passport_num": "E99887766", "destination": "London, UK",
     "flight_date": date(2025, 9, 5), "hotel_name": "The Savoy", "status": "Confirmed", "price": 5400},
    {"traveler_name": "John Wick", "passport_num": "F55664433", "destination": "Rome, Italy",
     "flight_date": date(2025, 12, 25), "hotel_name": "Continental Hotel", "status": "Pending", "price": 7000},
    {"traveler_name": "Tony Stark", "passport_num": "G11223344", "destination": "Malibu, USA",
     "flight_date": date(2025, 8, 15), "hotel_name": "N/A", "status": "Confirmed", "price": 1200},
    {"traveler_name": "Peter Parker", "passport_num": "H99882211", "destination": "Venice, Italy",
     "flight_date": date(2025, 7, 1), "hotel_name": "Hotel Danieli", "status": "Confirmed", "price": 2800},
]


def get_or_create_owner(db: Session, username: str, email: str, password: str) -> User:
    owner = db.query(User).filter(User.username == username).first()
    if owner is None:
        owner = User(username=username, email=email.lower(), password_hash=hash_password(password))
        db.add(owner)
        db.flush()
        logger.info(f"Created seed owner '{username}'")
    return owner


def seed_database(db: Session, owner: User) -> None:
    try:
        db.query(Booking).delete()
        db.query(Destination).delete()
        logger.info("Existing data cleared.")

        db.add_all([Destination(name=name) for name in SAMPLE_DESTINATIONS])
        db.add_all([Booking(user_id=owner.id, **data) for data in SAMPLE_BOOKINGS])
        db.commit()
        logger.info(f"Inserted {len(SAMPLE_DESTINATIONS)} destinations and {len(SAMPLE_BOOKINGS)} bookings.")
    except Exception:
        db.rollback()
        logger.exception("Error seeding database")
        raise


def main():
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    init_db()
    db = SessionLocal()
    try:
        owner = get_or_create_owner(db, settings.SEED_USERNAME, settings.SEED_EMAIL, settings.SEED_PASSWORD)
        seed_database(db, owner)
        logger.info("Seeding complete: database is ready!")
    finally:
        db.close()


if __name__ == "__main__":
    main()
