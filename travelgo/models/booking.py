from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
import datetime
import enum

from travelgo.models.base import Base

NO_HOTEL = "N/A"


class BookingStatus(str, enum.Enum):
    CONFIRMED = "Confirmed"
    PENDING = "Pending"
    CANCELLED = "Cancelled"


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    traveler_name = Column(String, nullable=False)
    passport_num = Column(String, nullable=False)
    destination = Column(String, nullable=False)
    flight_date = Column(Date, nullable=False)
    hotel_name = Column(String, nullable=False, default=NO_HOTEL)
    status = Column(String(20), nullable=False, default=BookingStatus.CONFIRMED.value)
    price = Column(Float, nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.datetime.utcnow, nullable=False)

    owner = relationship("User", back_populates="bookings")

    __table_args__ = (
        # A passport number is unique per owner, not globally
        UniqueConstraint("user_id", "passport_num", name="uq_booking_owner_passport"),
        CheckConstraint("price >= 0", name="ck_booking_price_non_negative"),
        CheckConstraint(
            "status IN ('Confirmed', 'Pending', 'Cancelled')", name="ck_booking_status"
        ),
    )

    def __repr__(self):
        return f"<Booking(id={self.id}, user={self.user_id}, passport={self.passport_num})>"
