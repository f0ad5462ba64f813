import uuid
from sqlalchemy import Column, String, ForeignKey, DateTime, Text, func
from sqlalchemy.orm import relationship

from shared.core.database import Base


class Space(Base):
    __tablename__ = "spaces"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(128), nullable=False)
    slug = Column(String(160), unique=True, index=True, nullable=False)  # immutable once set
    public_url = Column(String(200), nullable=False)
    redirect_url = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    owner = relationship("Users", back_populates="spaces")
    reviews = relationship(
        "Review",
        back_populates="space",
        cascade="all, delete-orphan"
    )
