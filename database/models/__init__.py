from .base import Base
from .user import User, UserRole, Homeowner, Contractor, ContractorSpecialty, ContractorServiceArea
from .job import Job
from .review import Review

__all__ = [
    'Base',
    'User',
    'UserRole',
    'Homeowner',
    'Contractor',
    'ContractorSpecialty',
    'ContractorServiceArea',
    'Job',
    'Review',
]
