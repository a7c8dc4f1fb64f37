"""Pytest fixtures for testing"""

import pytest
from prometheus_client import REGISTRY
from solid_demos.domain.models import Invoice, Product


@pytest.fixture
def sample_products() -> list[Product]:
    """Products used by the invoicing demo"""
    return [Product(price=99.99), Product(price=9.99), Product(price=24.99)]


@pytest.fixture
def invoice(sample_products: list[Product]) -> Invoice:
    return Invoice(products=sample_products)


@pytest.fixture
def metric_value():
    """Read a counter sample from the default registry, 0.0 when never incremented"""

    def read(name: str, **labels: str) -> float:
        return REGISTRY.get_sample_value(name, labels) or 0.0

    return read
