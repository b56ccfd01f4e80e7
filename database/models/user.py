import enum

from sqlalchemy import Column, Integer, String, Text, Boolean, Float, TIMESTAMP, ForeignKey, Enum, func
from sqlalchemy.orm import relationship

from core.domain import Specialty
from .base import Base


class UserRole(str, enum.Enum):
    HOMEOWNER = "HOMEOWNER"
    CONTRACTOR = "CONTRACTOR"


class User(Base):
    """
    Shared account fields for homeowners and contractors.

    Joined-table inheritance: `users` holds the common columns, the
    `homeowners` and `contractors` tables join on user_id.
    """
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True)
    password_hash = Column(Text, nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone_number = Column(String(32), nullable=False)
    role = Column(Enum(UserRole, name='user_role', native_enum=False), nullable=False)

    # 5-digit or ZIP+4
    zip_code = Column(String(10))

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    __mapper_args__ = {
        'polymorphic_on': role,
    }


class Homeowner(User):
    __tablename__ = 'homeowners'

    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), primary_key=True)
    preferred_contact_method = Column(String(32), default='email')
    mailing_address = Column(Text)

    posted_jobs = relationship("Job", back_populates="homeowner", foreign_keys="Job.homeowner_id")
    written_reviews = relationship("Review", back_populates="homeowner")

    __mapper_args__ = {
        'polymorphic_identity': UserRole.HOMEOWNER,
    }


class Contractor(User):
    __tablename__ = 'contractors'

    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), primary_key=True)
    company_name = Column(String(255), nullable=False)
    description = Column(Text)
    address = Column(Text)
    license_number = Column(String(64), unique=True)
    insured = Column(Boolean, nullable=False, default=False)

    # Average review rating, NULL until the first review
    rating = Column(Float)
    completed_jobs_count = Column(Integer, nullable=False, default=0)

    # Loaded eagerly so snapshots never depend on an open session
    specialties = relationship(
        "ContractorSpecialty",
        back_populates="contractor",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    service_areas = relationship(
        "ContractorServiceArea",
        back_populates="contractor",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    assigned_jobs = relationship("Job", back_populates="assigned_contractor", foreign_keys="Job.contractor_id")
    reviews = relationship("Review", back_populates="contractor")

    __mapper_args__ = {
        'polymorphic_identity': UserRole.CONTRACTOR,
    }

    def add_specialty(self, specialty: Specialty) -> None:
        if specialty not in self.specialty_values:
            self.specialties.append(ContractorSpecialty(specialty=specialty))

    @property
    def specialty_values(self):
        return {s.specialty for s in self.specialties}

    def add_service_area(self, zip_code: str) -> None:
        if zip_code not in {a.zip_code for a in self.service_areas}:
            self.service_areas.append(ContractorServiceArea(zip_code=zip_code))


class ContractorSpecialty(Base):
    __tablename__ = 'contractor_specialties'

    contractor_id = Column(Integer, ForeignKey('contractors.user_id', ondelete='CASCADE'), primary_key=True)
    specialty = Column(Enum(Specialty, name='specialty', native_enum=False), primary_key=True)

    contractor = relationship("Contractor", back_populates="specialties")


class ContractorServiceArea(Base):
    __tablename__ = 'contractor_service_areas'

    contractor_id = Column(Integer, ForeignKey('contractors.user_id', ondelete='CASCADE'), primary_key=True)
    zip_code = Column(String(10), primary_key=True)

    contractor = relationship("Contractor", back_populates="service_areas")
