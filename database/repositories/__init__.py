from database.repositories.base import BaseRepository
from database.repositories.job import JobRepository
from database.repositories.contractor import ContractorRepository

__all__ = [
    'BaseRepository',
    'JobRepository',
    'ContractorRepository',
]
