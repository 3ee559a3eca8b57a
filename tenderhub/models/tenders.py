import uuid

from sqlalchemy import Column, String, Text, Numeric, DateTime, ForeignKey, JSON, Uuid, CheckConstraint
from sqlalchemy.orm import relationship

from tenderhub.models.base import Base, utcnow
from tenderhub.models.enums import TenderStatus


class Tender(Base):
    __tablename__ = "tenders"
    __table_args__ = (
        CheckConstraint(
            "budget_min IS NULL OR budget_max IS NULL OR budget_min <= budget_max",
            name="ck_tender_budget_range",
        ),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    company_id = Column(Uuid, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    requirements = Column(JSON)
    category = Column(String(255))
    budget_min = Column(Numeric(15, 2))
    budget_max = Column(Numeric(15, 2))
    currency = Column(String(3), nullable=False, default="USD")
    deadline = Column(DateTime(timezone=True), nullable=False, index=True)
    status = Column(String(16), nullable=False, default=TenderStatus.OPEN.value, index=True)
    attachments = Column(JSON, default=list)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    company = relationship("Company", back_populates="tenders")
    applications = relationship("Application", back_populates="tender")
