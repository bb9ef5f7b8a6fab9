"""
Repositories Package - ESG Scoring Platform
app/repositories/__init__.py

Data access layer for scored ESG submissions.
"""

from app.repositories.base import BaseRepository
from app.repositories.esg_repository import (
    ESGRecordRepository,
    InMemoryESGRepository,
    SnowflakeESGRepository,
)

__all__ = [
    "BaseRepository",
    "ESGRecordRepository",
    "InMemoryESGRepository",
    "SnowflakeESGRepository",
]
