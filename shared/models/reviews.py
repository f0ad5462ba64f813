import uuid
from sqlalchemy import Boolean, CheckConstraint, Column, String, Integer, ForeignKey, DateTime, Text, func
from sqlalchemy.orm import relationship

from shared.core.database import Base


class Review(Base):
    __tablename__ = "reviews"
    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_reviews_rating_range"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    space_id = Column(String(36), ForeignKey("spaces.id", ondelete="CASCADE"), nullable=False, index=True)
    author_name = Column(String(200), nullable=False)
    author_email = Column(String(254), nullable=True)
    rating = Column(Integer, nullable=False)
    text = Column(Text, nullable=False)
    liked = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    space = relationship("Space", back_populates="reviews")
