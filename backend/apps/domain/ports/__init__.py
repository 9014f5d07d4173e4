# apps/domain/ports/__init__.py
"""
Ports - Interface Definitions (Dependency Inversion)

Ports define contracts between domain and infrastructure layers.
Domain depends on these interfaces, adapters implement them.
"""

from apps.domain.ports.producer import IAntibodyProducer
from apps.domain.ports.store import IImmuneStore

__all__ = ["IAntibodyProducer", "IImmuneStore"]
