from datetime import date

from sqlalchemy import Column, Date, String
from vural_api.db import Base

class Customer(Base):
    __tablename__ = "customers"

    id = Column(String(32), primary_key=True, index=True)
    name = Column(String(128), nullable=False)
    email = Column(String(256), unique=True, index=True, nullable=False)
    phone = Column(String(32), nullable=True)
    password_hash = Column(String(256), nullable=False)
    role = Column(String(16), default="user", nullable=False)  # user, admin
    status = Column(String(16), default="active", nullable=False)  # active, inactive
    join_date = Column(Date, default=date.today, nullable=False)
    avatar = Column(String(512), nullable=True)

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def __repr__(self):
        return f"<Customer email={self.email} role={self.role}>"
