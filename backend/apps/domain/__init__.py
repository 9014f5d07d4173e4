# apps/domain/__init__.py
"""
Domain Layer - Pure Python Business Logic

This package contains the core logic of the immune response simulator.
It has ZERO dependencies on Django or any delivery mechanism.

Key principles:
- Pure Python (no framework imports)
- Fully unit testable without infrastructure
- Independent of delivery mechanism (HTTP, CLI)
"""

__version__ = "1.0.0"
