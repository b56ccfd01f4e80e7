from sqlalchemy import Column, Integer, String, Text, Numeric, TIMESTAMP, ForeignKey, Enum, Index, func
from sqlalchemy.orm import relationship

from core.domain import JobStatus, Specialty
from .base import Base


class Job(Base):
    __tablename__ = 'jobs'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    category = Column(Enum(Specialty, name='job_category', native_enum=False), nullable=False)
    zip_code = Column(String(10), nullable=False)
    budget = Column(Numeric(10, 2), nullable=False)
    status = Column(Enum(JobStatus, name='job_status', native_enum=False), nullable=False, default=JobStatus.OPEN)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    homeowner_id = Column(Integer, ForeignKey('homeowners.user_id'), nullable=False)
    # NULL until a contractor is assigned
    contractor_id = Column(Integer, ForeignKey('contractors.user_id'))

    homeowner = relationship("Homeowner", back_populates="posted_jobs", foreign_keys=[homeowner_id])
    assigned_contractor = relationship("Contractor", back_populates="assigned_jobs", foreign_keys=[contractor_id])
    reviews = relationship("Review", back_populates="job", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_jobs_zip_code', 'zip_code'),
        Index('idx_jobs_status', 'status'),
    )
