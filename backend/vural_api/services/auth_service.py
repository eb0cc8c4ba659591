import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple
from urllib.parse import quote

import jwt
from sqlalchemy.orm import Session
from werkzeug.security import check_password_hash, generate_password_hash

from vural_api.config import settings
from vural_api.models.customer import Customer
from vural_api.repositories.customer_repo import CustomerRepository, RevokedTokenRepository
from vural_api.services.errors import AuthError, Conflict, InvalidInput, NotFound, PermissionDenied
from vural_api.utils.text import is_valid_email, new_id

log = logging.getLogger(__name__)

ALGORITHM = "HS256"
INVALID_CREDENTIALS = "Geçersiz e-posta veya şifre."
EMAIL_TAKEN = "Bu e-posta adresi zaten kayıtlı."


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def avatar_for(name: str) -> str:
    return f"https://api.dicebear.com/7.x/avataaars/svg?seed={quote(name)}"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuthService:
    """
    Credential checks and session tokens.

    Sessions are HS256 JWTs signed with SECRET_KEY and carrying the user id,
    role and a unique ``jti``. Logging out stores the ``jti`` until the token
    would have expired anyway.
    """

    def __init__(self, db: Session):
        self.db = db
        self.customers = CustomerRepository(db)
        self.revoked = RevokedTokenRepository(db)

    # --- tokens ---

    def issue_token(self, user: Customer) -> Tuple[str, int]:
        now = _utcnow()
        ttl = settings.SESSION_TTL_SECONDS
        claims = {
            "sub": user.id,
            "role": user.role,
            "jti": new_id(),
            "iat": now,
            "exp": now + timedelta(seconds=ttl),
        }
        return jwt.encode(claims, settings.SECRET_KEY, algorithm=ALGORITHM), ttl

    def decode_token(self, token: str) -> dict:
        try:
            claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
        except jwt.ExpiredSignatureError:
            raise AuthError("Session expired")
        except jwt.InvalidTokenError:
            raise AuthError("Invalid session token")
        if self.revoked.is_revoked(claims.get("jti", "")):
            raise AuthError("Session has been logged out")
        return claims

    def user_for_token(self, token: str) -> Customer:
        claims = self.decode_token(token)
        user = self.customers.get(claims.get("sub"))
        if not user:
            raise AuthError("Invalid session token")
        if user.status != "active":
            raise PermissionDenied("Account is inactive")
        return user

    # --- flows ---

    def login(self, email: str, password: str) -> Tuple[Customer, str, int]:
        user = self.customers.get_by_email(email)
        if not user or not check_password_hash(user.password_hash, password or ""):
            log.info("login failed for %s", email)
            raise AuthError(INVALID_CREDENTIALS)
        if user.status != "active":
            raise PermissionDenied("Account is inactive")
        token, ttl = self.issue_token(user)
        log.info("login ok user=%s role=%s", user.id, user.role)
        return user, token, ttl

    def create_account(
        self,
        name: str,
        email: str,
        password: str,
        role: str = "user",
        phone: Optional[str] = None,
    ) -> Customer:
        if not is_valid_email(email):
            raise InvalidInput("Invalid email address")
        if self.customers.get_by_email(email):
            raise Conflict(EMAIL_TAKEN)
        user = self.customers.add(
            {
                "name": name.strip(),
                "email": email.strip().lower(),
                "password_hash": hash_password(password),
                "role": role,
                "status": "active",
                "phone": phone or "",
                "avatar": avatar_for(name),
            }
        )
        self.db.commit()
        log.info("account created id=%s role=%s", user.id, role)
        return user

    def register(self, name: str, email: str, password: str, allow_registration: bool = True):
        if not allow_registration:
            raise PermissionDenied("Registration is disabled")
        self.create_account(name, email, password)
        return self.login(email, password)

    def logout(self, token: str) -> None:
        claims = self.decode_token(token)
        expires_at = datetime.fromtimestamp(claims["exp"], tz=timezone.utc).replace(tzinfo=None)
        self.revoked.revoke(claims["jti"], expires_at)
        self.db.commit()
        log.info("logout user=%s", claims.get("sub"))

    def purge_revoked(self) -> int:
        n = self.revoked.purge_expired(_utcnow().replace(tzinfo=None))
        self.db.commit()
        return n

    # --- account management ---

    def update_account(self, user_id: str, changes: dict) -> Customer:
        user = self.customers.get(user_id)
        if not user:
            raise NotFound("Customer not found")
        changes = {k: v for k, v in changes.items() if v is not None}
        password = changes.pop("password", None)
        if password:
            changes["password_hash"] = hash_password(password)
        email = changes.get("email")
        if email is not None:
            if not is_valid_email(email):
                raise InvalidInput("Invalid email address")
            other = self.customers.get_by_email(email)
            if other and other.id != user.id:
                raise Conflict(EMAIL_TAKEN)
            changes["email"] = email.strip().lower()
        self.customers.update(user, changes)
        self.db.commit()
        log.info("account updated id=%s fields=%s", user.id, sorted(changes))
        return user

    def delete_account(self, user_id: str) -> None:
        user = self.customers.get(user_id)
        if not user:
            raise NotFound("Customer not found")
        self.customers.delete(user)
        self.db.commit()
        log.info("account deleted id=%s", user_id)
