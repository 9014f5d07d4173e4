# apps/infrastructure/config.py

"""
Configuration Management

Environment-specific configurations for different deployment contexts.
"""

import os
from copy import deepcopy
from typing import Any, Dict, Optional


def get_environment() -> str:
    """
    Get current environment from environment variable

    Returns:
        Environment name: 'test', 'development', or 'production'
    """
    return os.getenv("ENVIRONMENT", "development")


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def get_config() -> Dict[str, Any]:
    """
    Get configuration for current environment

    Returns:
        Fresh copy of the configuration dictionary for the active environment

    Raises:
        ValueError: If an IMMUNE_* override is not an integer
    """
    env = get_environment()

    configs = {
        "test": TEST_CONFIG,
        "development": DEVELOPMENT_CONFIG,
        "production": PRODUCTION_CONFIG,
    }

    config = deepcopy(configs.get(env, DEVELOPMENT_CONFIG))
    config["environment"] = env

    if env != "test":
        config["antigen"]["max_value"] = _env_int(
            "IMMUNE_MAX_ANTIGEN_VALUE", config["antigen"]["max_value"]
        )
        config["random"]["seed"] = _env_int("IMMUNE_RANDOM_SEED", config["random"]["seed"])

    return config


# ============================================================
# TEST CONFIGURATION
# ============================================================

TEST_CONFIG = {
    "antigen": {"max_value": 100},
    "random": {"seed": 1234},  # Reproducible efforts
    "store": {"type": "memory"},
}

# ============================================================
# DEVELOPMENT CONFIGURATION
# ============================================================

DEVELOPMENT_CONFIG = {
    "antigen": {"max_value": 100},
    "random": {"seed": None},
    "store": {"type": "memory"},
}

# ============================================================
# PRODUCTION CONFIGURATION
# ============================================================

PRODUCTION_CONFIG = {
    "antigen": {"max_value": 100},
    "random": {"seed": None},
    "store": {"type": "memory"},
}

