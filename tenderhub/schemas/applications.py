from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from tenderhub.models.enums import ApplicationStatus
from tenderhub.schemas.common import UtcDatetime
from tenderhub.schemas.companies import CompanySummary


class ApplicationCreate(BaseModel):
    tender_id: UUID = Field(..., alias="tenderId")
    proposal: str = Field(..., min_length=50)
    quoted_price: Optional[float] = Field(None, gt=0, alias="quotedPrice")
    currency: str = Field("USD", min_length=3, max_length=3)
    attachments: List[str] = []

    class Config:
        populate_by_name = True


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus


class ApplicationOut(BaseModel):
    id: UUID
    tender_id: UUID
    company_id: UUID
    proposal: str
    quoted_price: Optional[float] = None
    currency: str
    attachments: List[str] = []
    status: str
    submitted_at: UtcDatetime
    updated_at: Optional[UtcDatetime] = None

    class Config:
        from_attributes = True


class ApplicationTender(BaseModel):
    id: UUID
    title: str
    deadline: UtcDatetime
    status: str
    company: Optional[CompanySummary] = None

    class Config:
        from_attributes = True


class ApplicationDetail(ApplicationOut):
    tender: Optional[ApplicationTender] = None
    company: Optional[CompanySummary] = None
