from datetime import datetime, timezone
from typing import Annotated, Any, Dict, List, Optional
from uuid import UUID

from pydantic import AfterValidator, BaseModel, BeforeValidator, Field, field_validator, model_validator

from tenderhub.models.base import ensure_utc
from tenderhub.models.enums import TenderStatus
from tenderhub.schemas.common import UtcDatetime, reject_null
from tenderhub.schemas.companies import CompanySummary

STATUS_ALIASES = {"published": TenderStatus.OPEN.value}


def normalize_status(value):
    if isinstance(value, str):
        value = value.strip().lower()
        return STATUS_ALIASES.get(value, value)
    return value


def check_future(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    value = ensure_utc(value)
    if value <= datetime.now(timezone.utc):
        raise ValueError("deadline must be in the future")
    return value


def check_budget(budget_min: Optional[float], budget_max: Optional[float]) -> None:
    if budget_min is not None and budget_max is not None and budget_min > budget_max:
        raise ValueError("budget_min must not exceed budget_max")


TenderStatusIn = Annotated[TenderStatus, BeforeValidator(normalize_status)]
FutureDatetime = Annotated[datetime, AfterValidator(check_future)]


class TenderCreate(BaseModel):
    title: str = Field(..., min_length=5)
    description: str = Field(..., min_length=20)
    requirements: Optional[Dict[str, Any]] = None
    category: Optional[str] = None
    budget_min: Optional[float] = Field(None, gt=0)
    budget_max: Optional[float] = Field(None, gt=0)
    currency: str = Field("USD", min_length=3, max_length=3)
    deadline: FutureDatetime
    attachments: List[str] = []
    status: TenderStatusIn = TenderStatus.OPEN

    @field_validator("status")
    @classmethod
    def initial_status(cls, value: TenderStatus) -> TenderStatus:
        if value not in (TenderStatus.DRAFT, TenderStatus.OPEN):
            raise ValueError("a new tender must be draft or open")
        return value

    @model_validator(mode="after")
    def budget_range(self):
        check_budget(self.budget_min, self.budget_max)
        return self


class TenderUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=5)
    description: Optional[str] = Field(None, min_length=20)
    requirements: Optional[Dict[str, Any]] = None
    category: Optional[str] = None
    budget_min: Optional[float] = Field(None, gt=0)
    budget_max: Optional[float] = Field(None, gt=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    deadline: Optional[FutureDatetime] = None
    attachments: Optional[List[str]] = None
    status: Optional[TenderStatusIn] = None

    @field_validator("title", "description", "currency", "deadline", "attachments")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)

    @model_validator(mode="after")
    def budget_range(self):
        check_budget(self.budget_min, self.budget_max)
        return self


class TenderOut(BaseModel):
    id: UUID
    company_id: UUID
    title: str
    description: str
    requirements: Optional[Dict[str, Any]] = None
    category: Optional[str] = None
    budget_min: Optional[float] = None
    budget_max: Optional[float] = None
    currency: str
    deadline: UtcDatetime
    status: str
    attachments: List[str] = []
    created_at: UtcDatetime
    updated_at: Optional[UtcDatetime] = None

    class Config:
        from_attributes = True


class TenderSummary(BaseModel):
    id: UUID
    title: str
    description: str
    category: Optional[str] = None
    budget_min: Optional[float] = None
    budget_max: Optional[float] = None
    currency: str
    deadline: UtcDatetime
    status: str
    created_at: UtcDatetime
    company: Optional[CompanySummary] = None

    class Config:
        from_attributes = True


class TenderDetail(TenderOut):
    company: Optional[CompanySummary] = None
    application_count: int = 0
