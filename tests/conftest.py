"""Pytest configuration and shared fixtures."""

import pytest

from balancer.adapters.records import entities_from_scores
from balancer.domain.entities.customer import Customer


@pytest.fixture
def ten_customers():
    """Ten customers with repeated scores, ids 1..10."""
    return entities_from_scores([10, 10, 10, 20, 20, 30, 30, 30, 20, 60], Customer)
