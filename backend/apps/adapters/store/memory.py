# apps/adapters/store/memory.py
"""
In-Memory Immune Store

Process-lifetime keyed map from antigen value to antigen.
"""
import threading
from typing import Dict, Optional

from apps.domain.models import Antibody, Antigen


class InMemoryImmuneStore:
    """
    In-memory immune store

    Insert-if-absent is atomic, so concurrent callers never overwrite an
    existing entry.
    """

    def __init__(self):
        self._antigens: Dict[int, Antigen] = {}
        self._lock = threading.Lock()

    def find(self, antigen: Antigen) -> Optional[Antibody]:
        """Recall antigen as a zero-effort antibody"""
        stored = self._antigens.get(antigen.value)
        if stored is None:
            return None
        return Antibody(antigen=stored, effort=0)

    def save(self, antibody: Antibody) -> None:
        """Store antibody's antigen unless its value is already known"""
        with self._lock:
            self._antigens.setdefault(antibody.antigen.value, antibody.antigen)

    def __len__(self) -> int:
        return len(self._antigens)

    def __contains__(self, value: int) -> bool:
        return value in self._antigens

    def clear(self):
        """Clear all antigens"""
        with self._lock:
            self._antigens.clear()
