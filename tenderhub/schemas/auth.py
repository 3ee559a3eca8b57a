from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from tenderhub.schemas.common import UtcDatetime


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8)
    company_name: str = Field(..., min_length=2, alias="companyName")
    industry: str = Field(..., min_length=2)
    description: Optional[str] = None

    class Config:
        populate_by_name = True


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserOut(BaseModel):
    id: UUID
    email: str
    role: str
    created_at: Optional[UtcDatetime] = None

    class Config:
        from_attributes = True
