from datetime import date, datetime, timezone

from sqlalchemy import Column, Date, DateTime, String, Text
from vural_api.db import Base


class QuoteRequest(Base):
    __tablename__ = "quotes"
    id = Column(String(32), primary_key=True, index=True)
    customer_name = Column(String(128), nullable=False)
    company_name = Column(String(256), nullable=True)
    email = Column(String(256), nullable=False)
    phone = Column(String(32), nullable=False)
    product_name = Column(String(256), nullable=False)
    product_sku = Column(String(64), nullable=False)
    message = Column(Text, nullable=False)
    notes = Column(Text, nullable=True)
    date = Column(Date, default=date.today, nullable=False, index=True)
    status = Column(String(16), default="new", nullable=False)  # new, offered, accepted, rejected


class ContactMessage(Base):
    __tablename__ = "contact_messages"
    id = Column(String(32), primary_key=True, index=True)
    name = Column(String(128), nullable=False)
    email = Column(String(256), nullable=False)
    phone = Column(String(32), nullable=True)
    subject = Column(String(256), nullable=True)
    message = Column(Text, nullable=False)
    date = Column(DateTime, default=lambda: datetime.now(timezone.utc), nullable=False, index=True)
    status = Column(String(16), default="new", nullable=False)  # new, read, replied


class JobApplication(Base):
    __tablename__ = "job_applications"
    id = Column(String(32), primary_key=True, index=True)
    full_name = Column(String(128), nullable=False)
    email = Column(String(256), nullable=False)
    phone = Column(String(32), nullable=False)
    position = Column(String(256), nullable=False)
    cover_letter = Column(Text, nullable=False)
    linkedin_url = Column(String(512), nullable=True)
    date = Column(Date, default=date.today, nullable=False)
    status = Column(String(16), default="new", nullable=False)  # new, reviewed, interview, rejected
