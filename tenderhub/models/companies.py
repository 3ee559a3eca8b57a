import uuid

from sqlalchemy import Column, String, Text, DateTime, ForeignKey, JSON, Uuid
from sqlalchemy.orm import relationship

from tenderhub.models.base import Base, utcnow


class Company(Base):
    __tablename__ = "companies"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    name = Column(String(255), nullable=False, index=True)
    industry = Column(String(255), index=True)
    description = Column(Text)
    website = Column(String(255))
    contact_email = Column(String(255))
    contact_phone = Column(String(64))
    address = Column(Text)
    registration_number = Column(String(128))
    contact_info = Column(JSON)  # free-form contact details
    logo_url = Column(String(1024))
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    owner = relationship("User", back_populates="company")
    goods_services = relationship("GoodsService", back_populates="company", cascade="all, delete-orphan")
    tenders = relationship("Tender", back_populates="company")
