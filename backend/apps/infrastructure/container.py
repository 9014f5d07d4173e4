# apps/infrastructure/container.py

"""
Dependency Injection Container

Simple factory functions for creating fully-wired services.
No magic, no framework - just explicit construction.
"""

from typing import Any, Dict, Optional
import logging

import numpy as np

from apps.domain.models import DomainException
from apps.infrastructure.config import get_config

logger = logging.getLogger(__name__)

STORE_TYPES = ('memory', 'fake')


# ============================================================
# ADAPTER FACTORIES
# ============================================================

def create_immune_store(config: Dict[str, Any]):
    """
    Factory for immune store based on configuration

    Args:
        config: Store configuration dict with 'type' key

    Returns:
        Implementation of IImmuneStore

    Raises:
        ValueError: If store type is unknown
    """
    store_type = config.get('type', 'memory')

    if store_type == 'memory':
        from apps.adapters.store.memory import InMemoryImmuneStore
        return InMemoryImmuneStore()

    elif store_type == 'fake':
        from apps.adapters.store.fake import FakeImmuneStore
        return FakeImmuneStore(known=config.get('known'))

    else:
        raise ValueError(f"Unknown immune store type: {store_type}")


def create_random_source(config: Dict[str, Any]):
    """
    Factory for the random source shared by the lymphatic system

    Args:
        config: Random configuration dict with optional 'seed' key

    Returns:
        numpy Generator, seeded when a seed is configured
    """
    return np.random.default_rng(config.get('seed'))


def create_lymphatic_system(config: Dict[str, Any]):
    """
    Factory for the lymphatic system

    Args:
        config: Full configuration dict

    Returns:
        LymphaticSystem bound to the configured max antigen value
    """
    from apps.domain.lymphatic import LymphaticSystem

    return LymphaticSystem(
        max_value=config['antigen']['max_value'],
        rng=create_random_source(config.get('random', {}))
    )


# ============================================================
# SERVICE FACTORIES
# ============================================================

def create_immune_service(config: Optional[Dict] = None):
    """
    Create fully-wired ImmuneService with all dependencies

    This is the main entry point for creating immune services.

    Args:
        config: Optional configuration dict. If None, uses environment config.

    Returns:
        ImmuneService instance with all dependencies injected

    Raises:
        DomainException: If the configuration is invalid

    Example:
        >>> service = create_immune_service()
        >>> antibody = service.respond(Antigen(5))
    """
    config = config or get_config()

    try:
        validate_config(config)

        store = create_immune_store(config['store'])
        lymphatic_system = create_lymphatic_system(config)

        from apps.domain.services.immune_service import ImmuneService
        service = ImmuneService(store=store, lymphatic_system=lymphatic_system)

        logger.info(
            f"Created ImmuneService with max_value={config['antigen']['max_value']}, "
            f"store={config['store']['type']}, "
            f"seed={config.get('random', {}).get('seed')}"
        )

        return service

    except Exception as e:
        logger.error(f"Failed to create immune service: {e}")
        raise DomainException(f"Service initialization failed: {e}")


# ============================================================
# VALIDATION
# ============================================================

def validate_config(config: Dict[str, Any]) -> bool:
    """
    Validate configuration structure

    Args:
        config: Configuration dictionary to validate

    Returns:
        True if valid

    Raises:
        ValueError: If configuration is invalid
    """
    required_keys = ['antigen', 'store']

    for key in required_keys:
        if key not in config:
            raise ValueError(f"Missing required config key: {key}")

    max_value = config['antigen'].get('max_value')
    if isinstance(max_value, bool) or not isinstance(max_value, int):
        raise ValueError("Antigen config 'max_value' must be an integer")

    # The console accepts [1, max_value - 1], which must not be empty
    if max_value < 2:
        raise ValueError(f"Antigen max_value must be at least 2, got {max_value}")

    # numpy draws int64 values
    if max_value > np.iinfo(np.int64).max:
        raise ValueError(f"Antigen max_value must fit in int64, got {max_value}")

    if 'type' not in config['store']:
        raise ValueError("Store config missing 'type' key")

    if config['store']['type'] not in STORE_TYPES:
        raise ValueError(f"Unknown immune store type: {config['store']['type']}")

    return True


# ============================================================
# HELPER FUNCTIONS
# ============================================================

def get_service_info(config: Optional[Dict] = None) -> Dict[str, Any]:
    """
    Get information about configured services

    Args:
        config: Optional config dict, uses environment config if None

    Returns:
        Dict with service configuration info
    """
    config = config or get_config()

    return {
        'environment': config.get('environment', 'unknown'),
        'max_value': config['antigen'].get('max_value'),
        'store': config['store'].get('type'),
        'seed': config.get('random', {}).get('seed'),
    }
