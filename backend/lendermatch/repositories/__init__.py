from .base import BaseRepository
from .lender_repository import LenderRepository

__all__ = [
    "BaseRepository",
    "LenderRepository",
]
