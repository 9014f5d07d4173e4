# apps/adapters/store/fake.py

"""
Fake Immune Store for testing
"""

from typing import Dict, Iterable, List, Optional

from apps.domain.models import Antibody, Antigen


class FakeImmuneStore:
    """
    Fake store that forgets everything unless preloaded

    Counts calls so tests can assert how the service used it.
    """

    def __init__(self, known: Optional[Iterable[int]] = None):
        """
        Initialize fake store

        Args:
            known: Antigen values that find() should report as recalled
        """
        self._known: Dict[int, Antigen] = {v: Antigen(v) for v in (known or [])}
        self.find_counter = 0
        self.save_counter = 0
        self.saved: List[Antibody] = []

    def find(self, antigen: Antigen) -> Optional[Antibody]:
        """Return a recalled antibody only for preloaded values"""
        self.find_counter += 1
        if antigen.value in self._known:
            return Antibody(antigen=self._known[antigen.value], effort=0)
        return None

    def save(self, antibody: Antibody) -> None:
        """Track the save without remembering it"""
        self.save_counter += 1
        self.saved.append(antibody)
