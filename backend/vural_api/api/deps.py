from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from vural_api.db import get_db
from vural_api.models.customer import Customer
from vural_api.services.auth_service import AuthService
from vural_api.services.errors import ServiceException

bearer = HTTPBearer(auto_error=False)


def get_token(creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer)) -> str:
    if creds is None or not creds.credentials:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return creds.credentials


def get_current_user(token: str = Depends(get_token), db: Session = Depends(get_db)) -> Customer:
    try:
        return AuthService(db).user_for_token(token)
    except ServiceException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


def get_optional_user(
    creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    db: Session = Depends(get_db),
) -> Optional[Customer]:
    if creds is None:
        return None
    try:
        return AuthService(db).user_for_token(creds.credentials)
    except ServiceException:
        return None


def require_admin(user: Customer = Depends(get_current_user)) -> Customer:
    if not user.is_admin:
        raise HTTPException(status_code=403, detail="Admin privileges required")
    return user
