import uuid

from sqlalchemy import Column, String, DateTime, Uuid
from sqlalchemy.orm import relationship

from tenderhub.models.base import Base, utcnow
from tenderhub.models.enums import AccountRole


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=AccountRole.ORGANIZATION_OWNER.value)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    company = relationship("Company", back_populates="owner", uselist=False)
