from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from travelgo.db import crud
from travelgo.db.session import get_db
from travelgo.schemas.booking import DestinationOut

router = APIRouter()


@router.get("", response_model=List[DestinationOut])
def list_destinations(db: Session = Depends(get_db)):
    return crud.list_destinations(db)
