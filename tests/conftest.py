"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from rental_store.api.main import create_app
from rental_store.domain.models import Customer
from rental_store.rendering.base import MoneyFormat
from rental_store.rendering.registry import RendererRegistry, default_registry
from rental_store.seed import build_sample_customer
from rental_store.utils.date_utils import fixed_clock


# Reference date shared by every statement test
TODAY = date(2024, 3, 15)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def registry() -> RendererRegistry:
    """Fresh registry with the built-in formats"""
    return default_registry()


@pytest.fixture
def money() -> MoneyFormat:
    return MoneyFormat(symbol="$", places=2)


@pytest.fixture
def customer(registry: RendererRegistry) -> Customer:
    """Customer with no rentals, evaluated on TODAY"""
    return Customer("Bob", clock=fixed_clock(TODAY), registry=registry)


@pytest.fixture
def bob() -> Customer:
    """Sample customer: Mad Max, Dune, Babe"""
    return build_sample_customer(TODAY)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())
