from datetime import date, datetime
from typing import Literal, Optional

from pydantic import Field

from vural_api.schemas.common import CamelModel

QuoteStatus = Literal["new", "offered", "accepted", "rejected"]
MessageStatus = Literal["new", "read", "replied"]
ApplicationStatus = Literal["new", "reviewed", "interview", "rejected"]


class QuoteIn(CamelModel):
    customer_name: str = Field(min_length=1)
    company_name: Optional[str] = None
    email: str
    phone: str
    product_name: str = "Genel Teklif"
    product_sku: str = "-"
    message: str = Field(min_length=1)
    notes: Optional[str] = None


class QuoteOut(CamelModel):
    id: str
    customer_name: str
    company_name: Optional[str] = None
    email: str
    phone: str
    product_name: str
    product_sku: str
    message: str
    notes: Optional[str] = None
    date: date
    status: str


class QuoteStatusIn(CamelModel):
    status: QuoteStatus


class ContactMessageIn(CamelModel):
    name: str = Field(min_length=1)
    email: str
    phone: Optional[str] = None
    subject: Optional[str] = None
    message: str = Field(min_length=1)


class ContactMessageOut(CamelModel):
    id: str
    name: str
    email: str
    phone: Optional[str] = None
    subject: Optional[str] = None
    message: str
    date: datetime
    status: str


class MessageStatusIn(CamelModel):
    status: MessageStatus


class JobApplicationIn(CamelModel):
    full_name: str = Field(min_length=1)
    email: str
    phone: str
    position: str = Field(min_length=1)
    cover_letter: str = Field(min_length=1)
    linkedin_url: Optional[str] = None


class JobApplicationOut(CamelModel):
    id: str
    full_name: str
    email: str
    phone: str
    position: str
    cover_letter: str
    linkedin_url: Optional[str] = None
    date: date
    status: str


class ApplicationStatusIn(CamelModel):
    status: ApplicationStatus


class NewsletterIn(CamelModel):
    email: str
