# taskboss/schemas/user.py
from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from taskboss.schemas.base import RequestModel, ResponseModel


class UserCreate(RequestModel):
    email: EmailStr
    password: str = Field(..., min_length=1)
    full_name: str = Field(..., min_length=1)


class UserLogin(RequestModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


# Email and id are not updatable through the profile endpoint
class UserUpdate(RequestModel):
    full_name: Optional[str] = Field(None, min_length=1)
    picture: Optional[str] = None
    password: Optional[str] = Field(None, min_length=1)


class User(ResponseModel):
    id: int
    email: str
    full_name: str
    picture: Optional[str] = None
    created_at: Optional[datetime] = None
