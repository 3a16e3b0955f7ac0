"""Pytest fixtures for dealer assignment validation tests.

Provides reusable fixtures for:
- A fixed validation clock
- The default dealer directory
- A validation engine bound to the fixed clock
- Builders for host-format cart payloads
- A TestClient with the clock and directory injected

Usage:
    def test_proceeds(client, run_payload):
        response = client.post("/api/v1/validation/run", json=run_payload())
        assert response.json() == {"operations": []}
"""

import json
import os
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

# Plain-text logs keep pytest output readable
os.environ.setdefault("LOG_JSON", "false")

import pytest
from fastapi.testclient import TestClient

from dealer_checkout.dependencies import get_dealer_directory, get_validation_engine
from dealer_checkout.domain.validation.engine import ValidationEngine
from dealer_checkout.infrastructure.dealers.in_memory_directory import InMemoryDealerDirectory


FIXED_NOW = datetime(2026, 10, 19, 15, 30, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def tomorrow(now) -> str:
    return (now + timedelta(days=1)).date().isoformat()


@pytest.fixture
def yesterday(now) -> str:
    return (now - timedelta(days=1)).date().isoformat()


@pytest.fixture
def directory() -> InMemoryDealerDirectory:
    return InMemoryDealerDirectory()


@pytest.fixture
def engine(now) -> ValidationEngine:
    return ValidationEngine(clock=lambda: now)


def make_cart(
    product_types: tuple[str, ...] = (),
    assignment: Optional[Any] = None,
    province: Optional[str] = None,
    province_code: Optional[str] = None,
    attribute_key: str = "dealer_assignment_data",
) -> dict[str, Any]:
    """Build a host-format cart payload.

    `assignment` may be a dict (JSON-encoded here), a raw string (used as is)
    or None (attribute omitted).
    """
    attributes = []
    if isinstance(assignment, dict):
        attributes.append({"key": attribute_key, "value": json.dumps(assignment)})
    elif isinstance(assignment, str):
        attributes.append({"key": attribute_key, "value": assignment})

    delivery_groups = []
    if province is not None or province_code is not None:
        delivery_groups.append({
            "deliveryAddress": {"province": province, "provinceCode": province_code}
        })

    return {
        "attributes": attributes,
        "lines": [
            {"merchandise": {"product": {"productType": product_type}}}
            for product_type in product_types
        ],
        "deliveryGroups": delivery_groups,
    }


@pytest.fixture
def run_payload():
    """Factory for RunInput payloads: run_payload(product_types, assignment, province=...)."""
    def _build(*args, **kwargs) -> dict[str, Any]:
        return {"cart": make_cart(*args, **kwargs)}
    return _build


@pytest.fixture
def client(engine, directory):
    """TestClient with a fixed-clock engine and the default directory."""
    from dealer_checkout.main import app

    app.dependency_overrides[get_validation_engine] = lambda: engine
    app.dependency_overrides[get_dealer_directory] = lambda: directory
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
