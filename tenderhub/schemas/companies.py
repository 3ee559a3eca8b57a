from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from tenderhub.schemas.common import UtcDatetime, reject_null


class GoodsServiceCreate(BaseModel):
    name: str = Field(..., min_length=2)
    description: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = []


class GoodsServiceUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2)
    description: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None

    @field_validator("name", "tags")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class GoodsServiceOut(BaseModel):
    id: UUID
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = []

    class Config:
        from_attributes = True


class CompanySummary(BaseModel):
    id: UUID
    name: str
    industry: Optional[str] = None
    logo_url: Optional[str] = None

    class Config:
        from_attributes = True


class CompanyOut(CompanySummary):
    description: Optional[str] = None
    website: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    address: Optional[str] = None
    registration_number: Optional[str] = None
    contact_info: Optional[Dict[str, Any]] = None
    created_at: Optional[UtcDatetime] = None


class CompanyDetail(CompanyOut):
    goods_services: List[GoodsServiceOut] = []


class CompanyUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2)
    industry: Optional[str] = Field(None, min_length=2)
    description: Optional[str] = None
    website: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    address: Optional[str] = None
    registration_number: Optional[str] = None
    contact_info: Optional[Dict[str, Any]] = Field(None, alias="contactInfo")

    @field_validator("name")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)

    class Config:
        populate_by_name = True
