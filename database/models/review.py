from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey, CheckConstraint, func
from sqlalchemy.orm import relationship

from .base import Base


class Review(Base):
    """A homeowner's 1-5 star review of a contractor for a job."""
    __tablename__ = 'reviews'

    id = Column(Integer, primary_key=True, autoincrement=True)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    job_id = Column(Integer, ForeignKey('jobs.id', ondelete='CASCADE'), nullable=False)
    homeowner_id = Column(Integer, ForeignKey('homeowners.user_id'), nullable=False)
    contractor_id = Column(Integer, ForeignKey('contractors.user_id'), nullable=False)

    job = relationship("Job", back_populates="reviews")
    homeowner = relationship("Homeowner", back_populates="written_reviews")
    contractor = relationship("Contractor", back_populates="reviews")

    __table_args__ = (
        CheckConstraint('rating BETWEEN 1 AND 5', name='ck_reviews_rating_range'),
    )
