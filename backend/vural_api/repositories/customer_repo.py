from typing import Optional

from sqlalchemy import func

from vural_api.models.customer import Customer
from vural_api.models.revoked_token import RevokedToken
from vural_api.repositories.base import CrudRepository


class CustomerRepository(CrudRepository[Customer]):
    model = Customer
    id_prefix = "usr-"
    order_by = Customer.join_date.desc()

    def get_by_email(self, email: str) -> Optional[Customer]:
        if not email:
            return None
        return (
            self.db.query(Customer)
            .filter(func.lower(Customer.email) == email.strip().lower())
            .first()
        )


class RevokedTokenRepository:
    def __init__(self, db):
        self.db = db

    def is_revoked(self, jti: str) -> bool:
        return self.db.get(RevokedToken, jti) is not None

    def revoke(self, jti: str, expires_at) -> RevokedToken:
        rec = self.db.get(RevokedToken, jti)
        if rec is None:
            rec = RevokedToken(jti=jti, expires_at=expires_at)
            self.db.add(rec)
            self.db.flush()
        return rec

    def purge_expired(self, now) -> int:
        deleted = (
            self.db.query(RevokedToken)
            .filter(RevokedToken.expires_at <= now)
            .delete(synchronize_session=False)
        )
        self.db.flush()
        return deleted
