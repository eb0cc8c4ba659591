from datetime import date
from typing import Literal, Optional

from pydantic import Field

from vural_api.schemas.common import CamelModel

Role = Literal["user", "admin"]
AccountStatus = Literal["active", "inactive"]


class CustomerOut(CamelModel):
    id: str
    name: str
    email: str
    phone: Optional[str] = None
    role: str
    status: str
    join_date: date
    avatar: Optional[str] = None


class CustomerCreate(CamelModel):
    name: str = Field(min_length=1)
    email: str
    password: str = Field(min_length=4)
    phone: Optional[str] = None
    role: Role = "user"


class CustomerUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[Role] = None
    status: Optional[AccountStatus] = None
    avatar: Optional[str] = None
    password: Optional[str] = Field(None, min_length=4)


class ProfileUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = None
    avatar: Optional[str] = None
    password: Optional[str] = Field(None, min_length=4)


class LoginIn(CamelModel):
    email: str
    password: str


class RegisterIn(CamelModel):
    name: str = Field(min_length=1)
    email: str
    password: str = Field(min_length=4)


class SessionOut(CamelModel):
    success: bool = True
    token: str
    token_type: str = "bearer"
    expires_in: int
    user: CustomerOut
