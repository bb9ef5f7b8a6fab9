"""
Custom Exceptions - ESG Scoring Platform
app/core/exceptions.py

Submission validation errors and repository errors.
"""
from typing import Optional


class ESGValidationException(Exception):
    """Base exception for rejected submissions."""

    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str, section: Optional[str] = None, field: Optional[str] = None):
        self.message = message
        self.section = section
        self.field = field
        super().__init__(message)


class MissingSectionException(ESGValidationException):
    """A required input section is absent, null or not an object."""

    error_code = "MISSING_SECTION"

    def __init__(self, section: str):
        super().__init__(f"Missing required section: {section}", section=section)


class MissingFieldException(ESGValidationException):
    """A required field inside a section is absent or null."""

    error_code = "MISSING_FIELD"

    def __init__(self, section: str, field: str):
        super().__init__(f"Missing required field: {section}.{field}", section=section, field=field)


class RepositoryException(Exception):
    """Base exception for repository operations."""

    pass


class DuplicateEntityException(RepositoryException):
    """Duplicate entity violation."""

    def __init__(self, message: str = "Entity already exists"):
        self.message = message
        super().__init__(message)


class DatabaseConnectionException(RepositoryException):
    """Database connection failure."""

    def __init__(self, message: str = "Database connection failed"):
        self.message = message
        super().__init__(message)
