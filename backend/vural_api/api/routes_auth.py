from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from vural_api.api.deps import get_current_user, get_token
from vural_api.db import get_db
from vural_api.models.customer import Customer
from vural_api.schemas.customer_schema import (
    CustomerOut,
    LoginIn,
    ProfileUpdate,
    RegisterIn,
    SessionOut,
)
from vural_api.services.auth_service import AuthService
from vural_api.services.settings_service import SettingsService

router = APIRouter(prefix="/auth", tags=["auth"])


def _session(user, token, ttl) -> dict:
    return SessionOut(token=token, expires_in=ttl, user=CustomerOut.model_validate(user)).to_json()


@router.post("/login", summary="Exchange email and password for a session token")
def login(payload: LoginIn, db: Session = Depends(get_db)):
    user, token, ttl = AuthService(db).login(payload.email, payload.password)
    return _session(user, token, ttl)


@router.post("/register", status_code=201, summary="Create a user account and log it in")
def register(payload: RegisterIn, db: Session = Depends(get_db)):
    allowed = SettingsService(db).allow_registration()
    user, token, ttl = AuthService(db).register(
        payload.name, payload.email, payload.password, allow_registration=allowed
    )
    return _session(user, token, ttl)


@router.post("/logout", summary="Revoke the current session token")
def logout(token: str = Depends(get_token), db: Session = Depends(get_db)):
    AuthService(db).logout(token)
    return {"success": True}


@router.get("/me", summary="Current user")
def me(user: Customer = Depends(get_current_user)):
    return CustomerOut.model_validate(user).to_json()


@router.patch("/me", summary="Update own profile")
def update_me(
    payload: ProfileUpdate,
    user: Customer = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    updated = AuthService(db).update_account(user.id, payload.changes())
    return CustomerOut.model_validate(updated).to_json()
