from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from travelgo.db.session import get_db
from travelgo.routes.deps import get_current_identity, get_token_issuer
from travelgo.schemas.auth import (
    AuthResponse,
    LoginRequest,
    ProfileResponse,
    ProfileUpdate,
    RegisterRequest,
    UserOut,
)
from travelgo.schemas.booking import MessageResponse
from travelgo.services import auth_service
from travelgo.services.security import Identity
from travelgo.services.token_service import TokenIssuer

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest = Body(...),
    db: Session = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    user = auth_service.register(db, payload.username, payload.email, payload.password)
    return {"token": issuer.issue(user), "user": user}


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest = Body(...),
    db: Session = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    user = auth_service.authenticate(db, payload.username, payload.password)
    return {"token": issuer.issue(user), "user": user}


@router.get("/me", response_model=UserOut)
def me(identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db)):
    return auth_service.get_user(db, identity.id)


@router.put("/profile", response_model=ProfileResponse)
def update_profile(
    payload: ProfileUpdate = Body(...),
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    user = auth_service.update_profile(
        db,
        identity.id,
        payload.model_dump(include={"username", "email"}, exclude_none=True),
        current_password=payload.current_password,
        new_password=payload.new_password,
        confirm_password=payload.confirm_password,
    )
    return {"message": "Profile updated successfully", "user": user}


@router.delete("/account", response_model=MessageResponse)
def delete_account(identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db)):
    auth_service.delete_account(db, identity.id)
    return {"message": "Account deleted successfully"}
