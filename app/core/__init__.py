"""
Core Package - ESG Scoring Platform
app/core/__init__.py

Core infrastructure: dependencies (app.core.dependencies), exceptions.
"""

from app.core.exceptions import (
    DatabaseConnectionException,
    DuplicateEntityException,
    ESGValidationException,
    MissingFieldException,
    MissingSectionException,
    RepositoryException,
)

__all__ = [
    "DatabaseConnectionException",
    "DuplicateEntityException",
    "ESGValidationException",
    "MissingFieldException",
    "MissingSectionException",
    "RepositoryException",
]
