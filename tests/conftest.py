# tests/conftest.py

"""
Pytest Fixtures - Shared test configurations for the engine, service and APIs
"""

import pytest
from fastapi.testclient import TestClient

from app.core.dependencies import get_esg_service
from app.main import app
from app.models.esg import ESGInput
from app.repositories.esg_repository import InMemoryESGRepository
from app.scoring.esg_calculator import ESGCalculator
from app.services.esg_service import ESGService
from tests.payloads import build_payload, best_case_payload


# =============================================================================
# SUBMISSION FIXTURES
# =============================================================================

@pytest.fixture
def baseline_payload():
    return build_payload()


@pytest.fixture
def baseline_input(baseline_payload):
    return ESGInput.model_validate(baseline_payload)


@pytest.fixture
def best_case_input():
    return ESGInput.model_validate(best_case_payload())


# =============================================================================
# ENGINE / SERVICE FIXTURES
# =============================================================================

@pytest.fixture
def calculator():
    return ESGCalculator()


@pytest.fixture
def repository():
    """Fresh in-memory store per test."""
    return InMemoryESGRepository()


@pytest.fixture
def service(repository, calculator):
    return ESGService(repository=repository, calculator=calculator, cache=None)


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture
def client(service):
    """TestClient backed by the per-test in-memory repository, no Redis."""
    app.dependency_overrides[get_esg_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def user_headers():
    return {"X-User-Id": "user-1"}
