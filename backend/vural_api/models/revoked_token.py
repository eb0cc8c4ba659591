from datetime import datetime

from sqlalchemy import Column, DateTime, String
from vural_api.db import Base


class RevokedToken(Base):
    __tablename__ = "revoked_tokens"
    jti = Column(String(64), primary_key=True)
    # naive UTC; rows past this point are purged by the scheduler
    expires_at = Column(DateTime, nullable=False, index=True)

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= now
