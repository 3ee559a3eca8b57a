import uuid

from sqlalchemy import Column, String, Text, Numeric, DateTime, ForeignKey, JSON, Uuid, UniqueConstraint
from sqlalchemy.orm import relationship

from tenderhub.models.base import Base, utcnow
from tenderhub.models.enums import ApplicationStatus


class Application(Base):
    __tablename__ = "applications"
    __table_args__ = (UniqueConstraint("tender_id", "company_id", name="uq_application_tender_company"),)

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    tender_id = Column(Uuid, ForeignKey("tenders.id", ondelete="CASCADE"), nullable=False, index=True)
    company_id = Column(Uuid, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)
    proposal = Column(Text, nullable=False)
    quoted_price = Column(Numeric(15, 2))
    currency = Column(String(3), nullable=False, default="USD")
    attachments = Column(JSON, default=list)
    status = Column(String(16), nullable=False, default=ApplicationStatus.SUBMITTED.value)
    submitted_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    tender = relationship("Tender", back_populates="applications")
    company = relationship("Company")
