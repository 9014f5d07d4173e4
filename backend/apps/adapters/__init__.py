# apps/adapters/__init__.py
"""
Adapters - Infrastructure Implementations

Adapters implement port interfaces defined in the domain layer.
They handle everything outside the domain (storage, test doubles).
"""

__version__ = "1.0.0"
