from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
from typing import List

from travelgo.db.session import get_db
from travelgo.routes.deps import get_current_identity
from travelgo.schemas.booking import BookingCreate, BookingOut, BookingUpdate, MessageResponse
from travelgo.services import booking_service
from travelgo.services.security import Identity

router = APIRouter()


@router.get("", response_model=List[BookingOut])
def list_bookings(identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db)):
    return booking_service.list_bookings(db, identity)


@router.get("/{booking_id}", response_model=BookingOut)
def get_booking(booking_id: int, identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db)):
    return booking_service.get_booking(db, identity, booking_id)


@router.post("", response_model=BookingOut, status_code=status.HTTP_201_CREATED)
def create_booking(
    booking: BookingCreate = Body(...),
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    return booking_service.create_booking(db, identity, booking.model_dump())


@router.put("/{booking_id}", response_model=BookingOut)
def update_booking(
    booking_id: int,
    booking: BookingUpdate = Body(...),
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    fields = booking.model_dump(exclude_unset=True)
    return booking_service.update_booking(db, identity, booking_id, fields)


@router.delete("/{booking_id}", response_model=MessageResponse)
def delete_booking(booking_id: int, identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db)):
    booking_service.delete_booking(db, identity, booking_id)
    return {"message": "Booking deleted successfully"}
