# apps/domain/ports/store.py

"""
Store Port - Interface for remembered antibodies

The store maps antigen values to antigens. A hit is reported as a
zero-effort antibody, a miss as None.
"""

from typing import Optional, Protocol

from apps.domain.models import Antibody, Antigen


class IImmuneStore(Protocol):
    """
    Interface for immune memory

    Insert-if-absent semantics: the first antibody saved for an antigen
    value is permanent, later saves for the same value are ignored.
    """

    def find(self, antigen: Antigen) -> Optional[Antibody]:
        """
        Recall an antibody for an antigen

        Args:
            antigen: Antigen to look up

        Returns:
            Antibody with effort 0 if the antigen is known, None otherwise
        """
        ...

    def save(self, antibody: Antibody) -> None:
        """
        Remember the antigen of an antibody

        Args:
            antibody: Antibody whose antigen should be stored

        Note:
            No-op if the antigen value is already stored
        """
        ...
