# backend/conftest.py

"""
Pytest configuration and fixtures.
"""
import numpy as np
import pytest

from apps.adapters.store.memory import InMemoryImmuneStore
from apps.domain.lymphatic import LymphaticSystem
from apps.domain.services.immune_service import ImmuneService


class ScriptedRandom:
    """Random source that returns predetermined batches of draws"""

    def __init__(self, batches):
        self._batches = [list(batch) for batch in batches]
        self.calls = []

    def integers(self, low, high, size):
        self.calls.append((low, high, size))
        return np.array(self._batches.pop(0))


@pytest.fixture
def scripted_random():
    """Factory for ScriptedRandom instances"""
    return ScriptedRandom


@pytest.fixture
def memory_store():
    return InMemoryImmuneStore()


@pytest.fixture
def lymphatic_system():
    return LymphaticSystem(max_value=100, rng=np.random.default_rng(7))


@pytest.fixture
def immune_service(memory_store, lymphatic_system):
    return ImmuneService(store=memory_store, lymphatic_system=lymphatic_system)


@pytest.fixture
def immune_app():
    """Immune app config with a fresh shared service for each test"""
    from django.apps import apps

    app_config = apps.get_app_config("immune")
    app_config.reset_service()
    yield app_config
    app_config.reset_service()
