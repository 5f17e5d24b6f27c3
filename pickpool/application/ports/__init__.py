from pickpool.application.ports.unit_of_work import UnitOfWork
from pickpool.application.ports.repositories import EntryRepository

__all__ = [
    "UnitOfWork",
    "EntryRepository",
]
